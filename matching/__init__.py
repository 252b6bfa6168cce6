#Expose the high-level pipeline pieces:
#Query / result shapes
#Ranking policy and fare estimation
#Candidate ranking
#Matcher orchestrator (the "one call" entry point)

from .models import DestinationQuery, CandidateVehicle
from .policy import FareBand, RankingPolicy, default_ranking_policy, peak_ranking_policy
from .pricing import FareEstimator, DistanceBandFareEstimator
from .scoring import rank_candidates
from .matcher import match_vehicles #the main function to call to match a rider with vehicles

__all__ = [
    "DestinationQuery",
    "CandidateVehicle",
    "FareBand",
    "RankingPolicy",
    "default_ranking_policy",
    "peak_ranking_policy",
    "FareEstimator",
    "DistanceBandFareEstimator",
    "rank_candidates",
    "match_vehicles",
]
