import os
import sys

# Make the repo root and this directory importable when running plain `pytest`
HERE = os.path.dirname(__file__)
sys.path.insert(0, os.path.abspath(os.path.join(HERE, "..")))
sys.path.insert(0, os.path.abspath(HERE))
