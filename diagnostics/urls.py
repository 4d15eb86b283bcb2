from django.urls import path
from . import views

urlpatterns = [
    path('api/network-info', views.network_info, name='network_info'),
    path('api/speed-test', views.speed_test, name='speed_test'),
    path('api/wifi/networks', views.wifi_networks, name='wifi_networks'),
    path('api/wifi/connected', views.wifi_connected, name='wifi_connected'),
    path('health', views.health, name='health'),
]
