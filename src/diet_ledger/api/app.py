"""FastAPI application factory."""

import logging
from collections.abc import Mapping
from datetime import date

from fastapi import Body, FastAPI, HTTPException, Request, status

from diet_ledger.api.models import GoalPayload, MealPayload
from diet_ledger.app_logging import configure_logging
from diet_ledger.containers import AppContainer
from diet_ledger.domain.categories import (
    CATEGORIES,
    CATEGORY_GROUPS,
    MEAL_TYPES,
    category_name,
)
from diet_ledger.domain.errors import PersistenceError, ValidationError
from diet_ledger.domain.foods import Food
from diet_ledger.domain.ledger import DayRecord, Meal, MealDraft
from diet_ledger.domain.progress import GroupProgress
from diet_ledger.services.drafts import add_food, new_draft
from diet_ledger.services.ledger_codec import meal_to_json
from diet_ledger.services.progress import (
    compute_day_progress,
    format_quantity,
    goal_badge,
    meals_by_time,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    def _persistence_failure(exc: PersistenceError) -> HTTPException:
        logger.exception("Failed to persist ledger")
        detail = "Your change is kept for this session but could not be saved."
        if container.settings.environment == "local":
            cause = exc.__cause__ or exc
            detail = f"{detail} (debug: {type(cause).__name__}: {cause})"
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail
        )

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/config")
    def config() -> dict[str, object]:
        """Return meal types and category configuration."""
        return {
            "mealTypes": list(MEAL_TYPES),
            "categories": [
                {"id": category.id, "name": category.name, "color": category.color}
                for category in CATEGORIES
            ],
            "categoryGroups": [
                {"name": group.name, "ids": list(group.ids), "color": group.color}
                for group in CATEGORY_GROUPS
            ],
        }

    @app.get("/goals")
    def get_goals(request: Request) -> dict[str, float]:
        """Return the goal table keyed by category id."""
        state_container: AppContainer = request.app.state.container
        goals = state_container.ledger_service.ledger.goals
        return {str(category_id): value for category_id, value in goals.items()}

    @app.put("/goals/{category_id}")
    def put_goal(
        category_id: int, payload: GoalPayload, request: Request
    ) -> dict[str, float]:
        """Set or clear the goal for a category."""
        state_container: AppContainer = request.app.state.container
        try:
            ledger = state_container.ledger_service.set_goal(category_id, payload.value)
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc
        return {str(key): value for key, value in ledger.goals.items()}

    @app.get("/days/{day}")
    def get_day(day: date, request: Request) -> dict[str, object]:
        """Return a day's meals and progress rows."""
        state_container: AppContainer = request.app.state.container
        ledger_service = state_container.ledger_service
        return _day_response(
            ledger_service.get_day_record(day), ledger_service.ledger.goals
        )

    @app.post("/days/{day}/meals")
    def post_meal(
        day: date, payload: MealPayload, request: Request
    ) -> dict[str, object]:
        """Add a meal, or replace the meal with the same id."""
        state_container: AppContainer = request.app.state.container
        ledger_service = state_container.ledger_service
        try:
            record = ledger_service.upsert_meal(day, payload.to_draft())
        except ValidationError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc
        return _day_response(record, ledger_service.ledger.goals)

    @app.delete("/days/{day}/meals/{meal_id}")
    def delete_meal(day: date, meal_id: str, request: Request) -> dict[str, object]:
        """Remove a meal; unknown ids are ignored."""
        state_container: AppContainer = request.app.state.container
        ledger_service = state_container.ledger_service
        try:
            record = ledger_service.remove_meal(day, meal_id)
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc
        return _day_response(record, ledger_service.ledger.goals)

    @app.get("/foods/search")
    def search_foods(
        request: Request, q: str = "", group: int | None = None
    ) -> dict[str, object]:
        """Search the food catalog by name."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.food_catalog_service.search(q, group_number=group)
        return {"foods": [_food_response(food) for food in foods]}

    @app.get("/foods/groups")
    def food_groups(request: Request) -> dict[str, object]:
        """Return the category numbers present in the catalog."""
        state_container: AppContainer = request.app.state.container
        return {"groups": state_container.food_catalog_service.group_numbers()}

    @app.post("/drafts/foods/{food_id}")
    def add_food_to_draft(
        food_id: int,
        request: Request,
        payload: MealPayload | None = Body(default=None),
    ) -> dict[str, object]:
        """Add one portion of a food's category to a meal draft."""
        state_container: AppContainer = request.app.state.container
        food = state_container.food_catalog_service.get(food_id)
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        draft = payload.to_draft() if payload else new_draft()
        return _draft_response(add_food(draft, food))

    return app


def _day_response(
    record: DayRecord, goals: Mapping[int, float]
) -> dict[str, object]:
    return {
        "date": record.day.isoformat(),
        "meals": [_meal_response(meal) for meal in meals_by_time(record)],
        "progress": [
            _progress_response(row) for row in compute_day_progress(record, goals)
        ],
    }


def _meal_response(meal: Meal) -> dict[str, object]:
    payload = meal_to_json(meal)
    payload["displayName"] = meal.display_name
    payload["portionLabels"] = [
        f"{category_name(category_id)}: {format_quantity(amount)}"
        for category_id, amount in meal.portions.items()
    ]
    return payload


def _progress_response(progress: GroupProgress) -> dict[str, object]:
    return {
        "name": progress.group.name,
        "ids": list(progress.group.ids),
        "color": progress.group.color,
        "consumed": progress.consumed,
        "goal": progress.goal,
        "remaining": progress.remaining,
        "isOverGoal": progress.is_over_goal,
        "progressFraction": progress.progress_fraction,
        "label": (
            f"{format_quantity(progress.consumed)} / "
            f"{'-' if progress.goal is None else format_quantity(progress.goal)}"
        ),
        "badge": goal_badge(progress),
    }


def _food_response(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "groupNumber": food.group_number,
        "servingDescription": food.serving_description,
        "servingWeightGrams": food.serving_weight_grams,
        "notes": food.notes,
    }


def _draft_response(draft: MealDraft) -> dict[str, object]:
    return {
        "id": draft.id,
        "type": draft.meal_type,
        "time": draft.time,
        "customName": draft.custom_name,
        "portions": [
            {"groupId": category_id, "amount": amount}
            for category_id, amount in draft.portions.items()
        ],
    }
