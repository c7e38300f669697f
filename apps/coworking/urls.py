from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'coworking'

router = DefaultRouter()
router.register(r'sessions', views.CoworkingSessionViewSet, basename='session')

urlpatterns = [
    # GET    /api/coworking/sessions/                       - List sessions (filter: status)
    # POST   /api/coworking/sessions/                       - Start session
    # GET    /api/coworking/sessions/{id}/                  - Session detail
    # POST   /api/coworking/sessions/{id}/extras/           - Add extra
    # DELETE /api/coworking/sessions/{id}/extras/{extra}/   - Remove / decrement extra
    # GET    /api/coworking/sessions/{id}/estimate/         - Running bill
    # POST   /api/coworking/sessions/{id}/finish/           - Finish and record order
    path('', include(router.urls)),
]
