from django.urls import path
from . import views

app_name = 'cash'

urlpatterns = [
    # POST /api/cash/start/      - Open the register
    # POST /api/cash/close/      - Close with counted cash
    # GET  /api/cash/current/    - Live report for the open session
    # GET  /api/cash/history/    - Closed sessions (filter: date_from, date_to)
    path('start/', views.start, name='start'),
    path('close/', views.close, name='close'),
    path('current/', views.current, name='current'),
    path('history/', views.history, name='history'),
]
