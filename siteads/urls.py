from django.urls import path

from . import views

app_name = "siteads"

urlpatterns = [
	path("", views.home, name="home"),
	path("ads/", views.ads_page, name="ads"),
	path("admin/", views.admin_panel, name="admin"),
	path("admin/ads/add/", views.add_ad, name="add_ad"),
	path("admin/ads/<str:ad_id>/update/", views.update_ad, name="update_ad"),
	path("admin/ads/<str:ad_id>/delete/", views.delete_ad, name="delete_ad"),
	path("admin/results/add/", views.add_result, name="add_result"),
	path("admin/results/<str:result_id>/update/", views.update_result, name="update_result"),
	path("admin/results/<str:result_id>/delete/", views.delete_result, name="delete_result"),
]
