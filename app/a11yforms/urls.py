from django.urls import path

from .views import address_form

app_name = "a11yforms"

urlpatterns = [
    path("address/", address_form, name="address"),
]
