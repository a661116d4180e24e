"""ASGI entrypoint for the meal plan insights API."""

from meal_plan_insights.api.app import create_app
from meal_plan_insights.containers import build_container

app = create_app(build_container())
