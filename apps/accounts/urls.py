from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # Member profile
    path('user/', views.get_current_user, name='current-user'),
    path('user/update/', views.update_current_user, name='update-profile'),

    # Member administration (admin only)
    path('members/', views.list_members, name='member-list'),
    path('members/<uuid:pk>/approve/', views.approve, name='member-approve'),
    path('members/<uuid:pk>/', views.delete, name='member-delete'),
]
