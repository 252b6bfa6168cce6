from django.urls import path
from matching_api.views import MatchVehiclesView

urlpatterns = [
    path('api/v1/match/', MatchVehiclesView.as_view(), name='match-vehicles'),
]
