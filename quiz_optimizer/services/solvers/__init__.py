# quiz_optimizer/services/solvers/__init__.py
"""
Exact selection solvers.

Each solver takes an ordered item list plus a capacity and returns the
selected subset together with its totals.
"""
