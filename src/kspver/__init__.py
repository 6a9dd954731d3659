"""
KSP Version Checker Package

Evaluates `:KSP_VERSION[...]` applicability annotations embedded in the
names of configuration nodes and values, and prunes configuration trees
down to the parts that apply to the running game version.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Where configuration files live
    - How patches are scheduled or applied
    - How results are displayed to a user

Callers hand in an already-parsed tree and an already-resolved game version.
"""

__version__ = "0.1.0"
