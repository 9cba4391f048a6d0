"""Public pages and the content admin panel.

Every page reads straight from the record store. Admin writes go to the store
and then redirect back to the panel, so what the user sees next is always a
fresh read.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from . import repository
from .forms import (
	EDIT_AD_PREFIX,
	EDIT_RESULT_PREFIX,
	NEW_AD_PREFIX,
	NEW_RESULT_PREFIX,
	AdForm,
	WebResultForm,
)
from .store import RecordStoreError

logger = logging.getLogger(__name__)

HOME_WEB_RESULT_LIMIT = 3
ADS_PAGE_AD_LIMIT = 4
ADS_PAGE_WEB_RESULT_LIMIT = 3

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"

ADMIN_TABS = ("ads", "results")


def _admin_url(tab: str = "ads") -> str:
	return f"{reverse('siteads:admin')}?tab={tab}"


@require_GET
def home(request):
	"""Landing page: the featured ad and the top web results."""
	featured_ad = None
	web_results = []
	try:
		ad = repository.get_featured_ad()
		results = repository.list_web_results(limit=HOME_WEB_RESULT_LIMIT)
	except RecordStoreError:
		logger.exception("Error fetching home page content")
		messages.error(request, "Failed to load content")
	else:
		featured_ad, web_results = ad, results

	return render(request, "siteads/home.html", {"featured_ad": featured_ad, "web_results": web_results})


@require_GET
def ads_page(request):
	"""Grid of non-featured ads above the top web results."""
	ads = []
	web_results = []
	try:
		found_ads = repository.list_ads(featured=False, limit=ADS_PAGE_AD_LIMIT)
		results = repository.list_web_results(limit=ADS_PAGE_WEB_RESULT_LIMIT)
	except RecordStoreError:
		logger.exception("Error fetching ads page content")
		messages.error(request, "Failed to load content")
	else:
		ads, web_results = found_ads, results

	return render(request, "siteads/ads.html", {"ads": ads, "web_results": web_results})


def _render_panel(
	request,
	*,
	tab: str | None = None,
	new_ad_form: AdForm | None = None,
	new_result_form: WebResultForm | None = None,
	editing_ad_id: str | None = None,
	edit_ad_form: AdForm | None = None,
	editing_result_id: str | None = None,
	edit_result_form: WebResultForm | None = None,
):
	ads = []
	web_results = []
	try:
		ads = repository.list_ads(newest_first=True)
		web_results = repository.list_web_results()
	except RecordStoreError:
		logger.exception("Error fetching data")
		messages.error(request, "Failed to load data")

	tab = tab or request.GET.get("tab") or "ads"
	if tab not in ADMIN_TABS:
		tab = "ads"

	# Edit drafts start from the freshly loaded row; a stale id just closes the form.
	if editing_ad_id is None:
		editing_ad_id = request.GET.get("edit_ad") or None
	if editing_ad_id and edit_ad_form is None:
		ad = next((a for a in ads if a.id == editing_ad_id), None)
		if ad is None:
			editing_ad_id = None
		else:
			edit_ad_form = AdForm(initial=ad.editable_values(), prefix=EDIT_AD_PREFIX)

	if editing_result_id is None:
		editing_result_id = request.GET.get("edit_result") or None
	if editing_result_id and edit_result_form is None:
		result = next((r for r in web_results if r.id == editing_result_id), None)
		if result is None:
			editing_result_id = None
		else:
			edit_result_form = WebResultForm(initial=result.editable_values(), prefix=EDIT_RESULT_PREFIX)

	return render(
		request,
		"siteads/admin/panel.html",
		{
			"tab": tab,
			"ads": ads,
			"web_results": web_results,
			"new_ad_form": new_ad_form or AdForm(prefix=NEW_AD_PREFIX),
			"new_result_form": new_result_form or WebResultForm(prefix=NEW_RESULT_PREFIX),
			"editing_ad_id": editing_ad_id,
			"edit_ad_form": edit_ad_form,
			"editing_result_id": editing_result_id,
			"edit_result_form": edit_result_form,
		},
	)


@require_GET
def admin_panel(request):
	"""Full listing of both tables with inline add/edit/delete."""
	return _render_panel(request)


@require_POST
def add_ad(request):
	form = AdForm(request.POST, prefix=NEW_AD_PREFIX)
	if not form.is_valid():
		messages.error(request, REQUIRED_FIELDS_MESSAGE)
		return _render_panel(request, tab="ads", new_ad_form=form)

	try:
		repository.create_ad(form.cleaned_data)
	except RecordStoreError:
		logger.exception("Error adding ad")
		messages.error(request, "Failed to add ad")
		return _render_panel(request, tab="ads", new_ad_form=form)

	messages.success(request, "Ad added successfully")
	return redirect(_admin_url("ads"))


@require_POST
def update_ad(request, ad_id: str):
	form = AdForm(request.POST, prefix=EDIT_AD_PREFIX)
	if not form.is_valid():
		messages.error(request, REQUIRED_FIELDS_MESSAGE)
		return _render_panel(request, tab="ads", editing_ad_id=ad_id, edit_ad_form=form)

	try:
		repository.update_ad(ad_id, form.cleaned_data)
	except RecordStoreError:
		logger.exception("Error updating ad %s", ad_id)
		messages.error(request, "Failed to update ad")
		return _render_panel(request, tab="ads", editing_ad_id=ad_id, edit_ad_form=form)

	messages.success(request, "Ad updated successfully")
	return redirect(_admin_url("ads"))


@require_http_methods(["GET", "POST"])
def delete_ad(request, ad_id: str):
	if request.method == "GET":
		return render(
			request,
			"siteads/admin/confirm_delete.html",
			{
				"prompt": "Are you sure you want to delete this ad?",
				"action_url": reverse("siteads:delete_ad", args=[ad_id]),
				"cancel_url": _admin_url("ads"),
			},
		)

	if request.POST.get("confirm") != "yes":
		return redirect(_admin_url("ads"))

	try:
		repository.delete_ad(ad_id)
	except RecordStoreError:
		logger.exception("Error deleting ad %s", ad_id)
		messages.error(request, "Failed to delete ad")
	else:
		messages.success(request, "Ad deleted successfully")
	return redirect(_admin_url("ads"))


@require_POST
def add_result(request):
	form = WebResultForm(request.POST, prefix=NEW_RESULT_PREFIX)
	if not form.is_valid():
		messages.error(request, REQUIRED_FIELDS_MESSAGE)
		return _render_panel(request, tab="results", new_result_form=form)

	try:
		repository.create_web_result(form.cleaned_data)
	except RecordStoreError:
		logger.exception("Error adding result")
		messages.error(request, "Failed to add web result")
		return _render_panel(request, tab="results", new_result_form=form)

	messages.success(request, "Web result added successfully")
	return redirect(_admin_url("results"))


@require_POST
def update_result(request, result_id: str):
	form = WebResultForm(request.POST, prefix=EDIT_RESULT_PREFIX)
	if not form.is_valid():
		messages.error(request, REQUIRED_FIELDS_MESSAGE)
		return _render_panel(request, tab="results", editing_result_id=result_id, edit_result_form=form)

	try:
		repository.update_web_result(result_id, form.cleaned_data)
	except RecordStoreError:
		logger.exception("Error updating result %s", result_id)
		messages.error(request, "Failed to update web result")
		return _render_panel(request, tab="results", editing_result_id=result_id, edit_result_form=form)

	messages.success(request, "Web result updated successfully")
	return redirect(_admin_url("results"))


@require_http_methods(["GET", "POST"])
def delete_result(request, result_id: str):
	if request.method == "GET":
		return render(
			request,
			"siteads/admin/confirm_delete.html",
			{
				"prompt": "Are you sure you want to delete this web result?",
				"action_url": reverse("siteads:delete_result", args=[result_id]),
				"cancel_url": _admin_url("results"),
			},
		)

	if request.POST.get("confirm") != "yes":
		return redirect(_admin_url("results"))

	try:
		repository.delete_web_result(result_id)
	except RecordStoreError:
		logger.exception("Error deleting result %s", result_id)
		messages.error(request, "Failed to delete web result")
	else:
		messages.success(request, "Web result deleted successfully")
	return redirect(_admin_url("results"))
