from django.urls import include, path

urlpatterns = [
    path("", include("a11yforms.urls")),
]
