"""Observability – logging, delivery metrics and health reporting."""
