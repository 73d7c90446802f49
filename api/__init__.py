"""holidaycalc HTTP service."""
