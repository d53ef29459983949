"""
Service layer.

Services encapsulate the business logic so that API handlers stay thin
and the store behind them can be swapped without touching the routes.
"""
