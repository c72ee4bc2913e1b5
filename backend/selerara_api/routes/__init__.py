# Routes package init
"""
Selerara Dashboard API — API Routes Package
=============================================

Route Inventory (all GET, mounted under settings.api_prefix):
    - health.py:   /health, /db-health
    - users.py:    /users
    - images.py:   /images
    - faqs.py:     /faqs
    - menu.py:     /menu, /menu-items, /menu-categories
    - reviews.py:  /reviews

Routes are THIN: pick the service call, declare the response model. No route
catches exceptions; main.register_exception_handlers maps them to responses.
"""

from selerara_api.routes import faqs, health, images, menu, reviews, users

ALL_ROUTERS = (
    health.router,
    users.router,
    images.router,
    faqs.router,
    menu.router,
    reviews.router,
)
