import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
        ("items", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("start", models.DateTimeField(db_column="start_time", verbose_name="Начало")),
                ("end", models.DateTimeField(db_column="end_time", verbose_name="Окончание")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("WAITING", "Ожидает подтверждения"),
                            ("APPROVED", "Подтверждено"),
                            ("REJECTED", "Отклонено"),
                        ],
                        default="WAITING",
                        max_length=16,
                    ),
                ),
                (
                    "booker",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="users.user",
                    ),
                ),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="items.item",
                    ),
                ),
            ],
            options={
                "verbose_name": "Бронирование",
                "verbose_name_plural": "Бронирования",
                "db_table": "bookings",
                "ordering": ["-start"],
                "indexes": [
                    models.Index(fields=["booker", "start"], name="booking_booker_start_idx"),
                    models.Index(fields=["item", "start"], name="booking_item_start_idx"),
                    models.Index(fields=["status"], name="booking_status_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(end__gte=models.F("start")),
                        name="booking_end_not_before_start",
                    ),
                ],
            },
        ),
    ]
