from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="vendor",
            constraint=models.UniqueConstraint(
                condition=models.Q(("restaurant_name", ""), _negated=True),
                fields=("restaurant_name",),
                name="unique_vendor_restaurant_name",
            ),
        ),
    ]
