import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = []

	operations = [
		migrations.CreateModel(
			name="Ad",
			fields=[
				("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
				("title", models.TextField()),
				("description", models.TextField()),
				("url", models.TextField()),
				("image_url", models.TextField(blank=True, null=True)),
				("is_featured", models.BooleanField(default=False)),
				("created_at", models.DateTimeField(auto_now_add=True)),
			],
			options={
				"db_table": "ads",
			},
		),
		migrations.CreateModel(
			name="WebResult",
			fields=[
				("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
				("title", models.TextField()),
				("description", models.TextField()),
				("url", models.TextField()),
				(
					"display_order",
					models.IntegerField(default=0, help_text="Lower is shown first."),
				),
				("created_at", models.DateTimeField(auto_now_add=True)),
			],
			options={
				"db_table": "web_results",
			},
		),
	]
