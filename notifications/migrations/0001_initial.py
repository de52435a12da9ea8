import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                (
                    "notification_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the notification",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "recipient_id",
                    models.UUIDField(help_text="User receiving the notification"),
                ),
                (
                    "recipient_role",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Role of the recipient at time of sending",
                        max_length=100,
                    ),
                ),
                (
                    "notification_type",
                    models.CharField(
                        choices=[
                            ("order_update", "order_update"),
                            ("promotion", "promotion"),
                            ("delivery_assigned", "delivery_assigned"),
                            ("payment_received", "payment_received"),
                            ("order_cancelled", "order_cancelled"),
                            ("order_delivered", "order_delivered"),
                            ("rating_request", "rating_request"),
                            ("loyalty_earned", "loyalty_earned"),
                            ("new_order", "new_order"),
                        ],
                        help_text="Domain event that triggered the notification",
                        max_length=30,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("transactional", "transactional"),
                            ("promotional", "promotional"),
                            ("informational", "informational"),
                        ],
                        default="transactional",
                        help_text="Delivery policy class",
                        max_length=20,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("message", models.TextField()),
                (
                    "data",
                    models.JSONField(
                        blank=True,
                        help_text="Opaque payload defined by the producer",
                        null=True,
                    ),
                ),
                ("push_enabled", models.BooleanField(default=True)),
                ("sms_enabled", models.BooleanField(default=False)),
                ("email_enabled", models.BooleanField(default=False)),
                ("in_app_enabled", models.BooleanField(default=True)),
                (
                    "priority",
                    models.CharField(
                        choices=[
                            ("low", "low"),
                            ("medium", "medium"),
                            ("high", "high"),
                            ("urgent", "urgent"),
                        ],
                        default="medium",
                        max_length=10,
                    ),
                ),
                ("is_read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("related_order_id", models.UUIDField(blank=True, null=True)),
                ("related_menu_item_id", models.UUIDField(blank=True, null=True)),
                (
                    "action_type",
                    models.CharField(blank=True, max_length=50, null=True),
                ),
                (
                    "action_url",
                    models.CharField(blank=True, max_length=500, null=True),
                ),
                (
                    "action_label",
                    models.CharField(blank=True, max_length=100, null=True),
                ),
                (
                    "expires_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="Record is purged by the expiry sweep after this time",
                        null=True,
                    ),
                ),
                (
                    "scheduled_for",
                    models.DateTimeField(
                        blank=True, help_text="Deferred delivery time", null=True
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "notifications",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["recipient_id", "is_read", "-created_at"],
                        name="notif_recipient_unread_idx",
                    ),
                    models.Index(fields=["expires_at"], name="notif_expires_at_idx"),
                    models.Index(
                        fields=["scheduled_for"], name="notif_scheduled_for_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="DeliveryStatus",
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
                (
                    "channel",
                    models.CharField(
                        choices=[("push", "push"), ("sms", "sms"), ("email", "email")],
                        help_text="Delivery channel (push, sms, email)",
                        max_length=10,
                    ),
                ),
                (
                    "status",
                    models.TextField(
                        blank=True,
                        help_text="Delivery status reported by the dispatcher",
                        null=True,
                    ),
                ),
                (
                    "sent_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the latest outcome was recorded",
                        null=True,
                    ),
                ),
                (
                    "error",
                    models.TextField(
                        blank=True,
                        help_text="Error details if delivery failed",
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "notification",
                    models.ForeignKey(
                        db_column="notification_id",
                        help_text="Parent notification",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="delivery_statuses",
                        to="notifications.notification",
                    ),
                ),
            ],
            options={
                "db_table": "notification_delivery_statuses",
                "ordering": ["channel"],
                "unique_together": {("notification", "channel")},
            },
        ),
    ]
