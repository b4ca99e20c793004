# core/urls.py
from django.urls import path
from .views import SubmitScoreView, LeaderboardView

urlpatterns = [
    # POST a new score (appended to the spreadsheet)
    path('submit-score', SubmitScoreView.as_view(), name='submit-score'),

    # GET the top 10 scores (publicly readable)
    path('leaderboard', LeaderboardView.as_view(), name='leaderboard'),
]
