import os
import sys

# -------------------------
# PATH SETUP
# -------------------------
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)
