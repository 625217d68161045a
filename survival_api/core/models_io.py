"""Pydantic request/response schemas used by the API.

Field names match the passenger form so payloads stay compatible across
direct API calls and the web client. Passenger fields accept text or
numbers and are all optional at this level: the survival service is the
one place that decides what is missing or invalid.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..ml.features import PassengerInput
from ..services.survival import AnalysisResult, PredictionResult, survival_outlook


class PassengerRequest(BaseModel):
    """
    Passenger details for a survival prediction or analysis.
    """
    name: Optional[str] = Field(None, description="Full name, including the title (e.g. Mr. John Smith)")
    pclass: Optional[Union[int, str]] = Field(None, description="Passenger class (1, 2 or 3)")
    sex: Optional[str] = Field(None, description="male or female")
    age: Optional[Union[float, str]] = Field(None, description="Age in years")
    sibsp: Optional[Union[int, str]] = Field(None, description="Siblings/spouses aboard")
    parch: Optional[Union[int, str]] = Field(None, description="Parents/children aboard")
    fare: Optional[Union[float, str]] = Field(None, description="Ticket fare")
    cabin: Optional[bool] = Field(None, description="Whether the passenger had a private cabin")
    embarked: Optional[str] = Field(None, description="Port of embarkation (S, C or Q)")

    def to_passenger(self) -> PassengerInput:
        return PassengerInput(
            name=self.name,
            pclass=self.pclass,
            sex=self.sex,
            age=self.age,
            sibsp=self.sibsp,
            parch=self.parch,
            fare=self.fare,
            embarked=self.embarked,
            cabin=self.cabin,
        )


class PredictionResponse(BaseModel):
    survival_probability: float

    @classmethod
    def from_result(cls, result: PredictionResult) -> "PredictionResponse":
        return cls(survival_probability=result.survival_probability)


class FactorAnalysis(BaseModel):
    """One suggested change and how much it would help."""
    factor: str
    change_to: str
    impact_on_survival: str  # e.g. "+12.5%"


class AnalysisResponse(BaseModel):
    """
    Survival analysis we send back to users.
    """
    base_probability: float
    model_accuracy: float
    factor_analysis: List[FactorAnalysis]
    outlook: str          # low | moderate | high
    outlook_label: str    # Banner text for the outlook

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        outlook = survival_outlook(result.base_probability)
        return cls(
            base_probability=result.base_probability,
            model_accuracy=result.model_accuracy,
            factor_analysis=[
                FactorAnalysis(
                    factor=s.factor,
                    change_to=s.change_to,
                    impact_on_survival=s.impact_on_survival,
                )
                for s in result.factor_analysis
            ],
            outlook=outlook.level,
            outlook_label=outlook.label,
        )
