# core/consts.py

# Tolerance for float comparisons, the plane parallel test and the shadow
# over point offset.
EPSILON = 1e-5
