"""
Root marker for pytest. Its presence makes pytest insert the repository root
into sys.path, so the flat packages import from a checkout.
"""
