import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Item",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Название")),
                ("description", models.TextField(verbose_name="Описание")),
                (
                    "available",
                    models.BooleanField(
                        default=True,
                        help_text="Только доступные вещи можно забронировать.",
                        verbose_name="Доступна",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Вещь",
                "verbose_name_plural": "Вещи",
                "db_table": "items",
                "ordering": ["id"],
            },
        ),
    ]
