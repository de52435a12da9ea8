"""Django project for the food-ordering notification service."""
