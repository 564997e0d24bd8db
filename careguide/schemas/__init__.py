from careguide.schemas.catalog import (
    HomeCareRemedy,
    Medicine,
    MedicineGuidelines,
    MedicineType,
    NaturalRemedy,
    SafetyDisclaimer,
    SymptomMapping,
)
from careguide.schemas.kids import (
    AgeGroup,
    KidsReferenceResponse,
    KidsSymptom,
    KidsSymptomCategory,
)
from careguide.schemas.recommendations import (
    AssessmentResponse,
    DetailedRecommendations,
    RecommendationBundle,
    RecommendationRequest,
    RecommendationResponse,
    SafetyInfoResponse,
    SymptomIndexResponse,
    SymptomTextRequest,
    SymptomTextResponse,
)
from careguide.schemas.symptoms import (
    FollowUpOption,
    FollowUpQuestion,
    Severity,
    SymptomAssessment,
    SymptomDetail,
    SymptomRecommendations,
    UrgencyLevel,
)

__all__ = [
    "HomeCareRemedy",
    "Medicine",
    "MedicineGuidelines",
    "MedicineType",
    "NaturalRemedy",
    "SafetyDisclaimer",
    "SymptomMapping",
    "AgeGroup",
    "KidsReferenceResponse",
    "KidsSymptom",
    "KidsSymptomCategory",
    "AssessmentResponse",
    "DetailedRecommendations",
    "RecommendationBundle",
    "RecommendationRequest",
    "RecommendationResponse",
    "SafetyInfoResponse",
    "SymptomIndexResponse",
    "SymptomTextRequest",
    "SymptomTextResponse",
    "FollowUpOption",
    "FollowUpQuestion",
    "Severity",
    "SymptomAssessment",
    "SymptomDetail",
    "SymptomRecommendations",
    "UrgencyLevel",
]
