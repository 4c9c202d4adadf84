import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AnalyticsEvent",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("restaurant_name", models.CharField(max_length=200)),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("scan", "QR Scan"),
                            ("visit", "Visit"),
                            ("menu_view", "Menu View"),
                            ("item_view", "Item View"),
                        ],
                        max_length=20,
                    ),
                ),
                ("ip_hash", models.CharField(blank=True, max_length=64)),
                ("user_agent_hash", models.CharField(blank=True, max_length=64)),
                ("referrer", models.TextField(blank=True)),
                (
                    "timestamp",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("metadata", models.JSONField(blank=True, default=dict)),
                (
                    "vendor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="%(class)ss",
                        to="core.vendor",
                    ),
                ),
            ],
            options={
                "ordering": ["-timestamp"],
                "indexes": [
                    models.Index(
                        fields=["vendor", "-timestamp"],
                        name="analytics_a_vendor__3f9e21_idx",
                    ),
                    models.Index(
                        fields=["restaurant_name", "-timestamp"],
                        name="analytics_a_restaur_7b1c05_idx",
                    ),
                    models.Index(
                        fields=["event_type", "-timestamp"],
                        name="analytics_a_event_t_d24a86_idx",
                    ),
                ],
            },
        ),
    ]
