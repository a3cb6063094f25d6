"""Web adapter — FastAPI routes for submitting actions."""
