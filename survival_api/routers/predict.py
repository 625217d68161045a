"""Prediction and what-if analysis endpoints.

Exposes:
- POST /predict: survival probability for a passenger
- POST /analyze: base probability, outlook and what-if suggestions
"""

from fastapi import APIRouter, HTTPException

from ..core.errors import AnalysisFailedError, PassengerValidationError
from ..core.models_io import AnalysisResponse, PassengerRequest, PredictionResponse
from ..services.survival import analyze_survival, predict_survival

router = APIRouter()


@router.post("/predict", response_model=PredictionResponse)
async def predict(request: PassengerRequest):
    try:
        result = await predict_survival(request.to_passenger())
    except PassengerValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except AnalysisFailedError as e:
        raise HTTPException(status_code=500, detail=e.message)
    return PredictionResponse.from_result(result)


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: PassengerRequest):
    try:
        result = await analyze_survival(request.to_passenger())
    except PassengerValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except AnalysisFailedError as e:
        raise HTTPException(status_code=500, detail=e.message)
    return AnalysisResponse.from_result(result)
