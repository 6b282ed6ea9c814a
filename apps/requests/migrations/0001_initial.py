import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ItemRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("description", models.TextField(verbose_name="Описание")),
                ("created", models.DateTimeField(verbose_name="Создан")),
                (
                    "requestor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="item_requests",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Запрос вещи",
                "verbose_name_plural": "Запросы вещей",
                "db_table": "requests",
                "ordering": ["-created", "-id"],
                "indexes": [
                    models.Index(fields=["requestor", "created"], name="request_requestor_created_idx"),
                ],
            },
        ),
    ]
