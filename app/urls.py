from django.urls import include, path

urlpatterns = [
	path("", include("siteads.urls")),
]
