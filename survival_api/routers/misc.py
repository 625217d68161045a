"""Miscellaneous endpoints for UI support.

Exposes `/form-options`, which the frontend uses to build the passenger
form and validate entries before sending prediction/analysis requests,
and `/model-info`, the static description shown next to a result.
"""

from fastapi import APIRouter

from ..core.config import MODEL_ACCURACY, MODEL_COMPONENTS, MODEL_NAME

router = APIRouter()


@router.get("/form-options")
def get_form_options():
    """Allowed choices and numeric minimums for the passenger form."""
    return {
        "pclass": [
            {"value": "1", "label": "1st Class (The Aristocracy)"},
            {"value": "2", "label": "2nd Class (The Middle Class)"},
            {"value": "3", "label": "3rd Class (Steerage)"},
        ],
        "sex": [
            {"value": "male", "label": "Male"},
            {"value": "female", "label": "Female"},
        ],
        "embarked": [
            {"value": "S", "label": "Southampton, England"},
            {"value": "C", "label": "Cherbourg, France"},
            {"value": "Q", "label": "Queenstown, Ireland"},
        ],
        "age": {"min": 0, "max": 100},
        "sibsp": {"min": 0},
        "parch": {"min": 0},
        "fare": {"min": 0},
    }


@router.get("/model-info")
def get_model_info():
    """Description of the stacking ensemble behind the score."""
    return {
        "model": MODEL_NAME,
        "description": (
            "An ensemble model that combines the predictions from several "
            "individual models to achieve higher accuracy and robustness."
        ),
        "components": list(MODEL_COMPONENTS),
        "model_accuracy": MODEL_ACCURACY,
    }
