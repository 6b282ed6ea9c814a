import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("items", "0001_initial"),
        ("requests", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="item",
            name="request",
            field=models.ForeignKey(
                blank=True,
                help_text="Запрос, в ответ на который добавлена вещь.",
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="items",
                to="requests.itemrequest",
            ),
        ),
    ]
