import os
import sys

# The package lives in kmrsa/python/kmrsa; the top-level kmrsa/ directory
# must not be picked up as a namespace package when running from the
# repository root.
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "kmrsa", "python")
)
