from __future__ import annotations

from django import forms
from django.core.exceptions import ValidationError

# Field prefixes keep the add and edit forms apart on the admin panel.
NEW_AD_PREFIX = "new-ad"
EDIT_AD_PREFIX = "edit-ad"
NEW_RESULT_PREFIX = "new-result"
EDIT_RESULT_PREFIX = "edit-result"


class LenientIntegerField(forms.IntegerField):
	"""Integer input that reads blank or unparsable values as 0."""

	def to_python(self, value):
		try:
			value = super().to_python(value)
		except ValidationError:
			return 0
		return 0 if value is None else value


class AdForm(forms.Form):
	title = forms.CharField(label="Title *", widget=forms.TextInput(attrs={"placeholder": "Enter ad title"}))
	description = forms.CharField(
		label="Description *",
		widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Enter ad description"}),
	)
	url = forms.CharField(label="URL *", widget=forms.TextInput(attrs={"placeholder": "https://example.com"}))
	image_url = forms.CharField(
		label="Image URL",
		required=False,
		widget=forms.TextInput(attrs={"placeholder": "https://example.com/image.jpg"}),
	)
	is_featured = forms.BooleanField(label="Featured ad", required=False)


class WebResultForm(forms.Form):
	title = forms.CharField(label="Title *", widget=forms.TextInput(attrs={"placeholder": "Enter result title"}))
	description = forms.CharField(
		label="Description *",
		widget=forms.Textarea(attrs={"rows": 2, "placeholder": "Enter result description"}),
	)
	url = forms.CharField(label="URL *", widget=forms.TextInput(attrs={"placeholder": "https://example.com"}))
	display_order = LenientIntegerField(label="Display Order", required=False, initial=0)
