# Generated for the Fish-Smart members schema

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ColorVar',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Custom property name including the leading "--"', max_length=50)),
                ('value', models.CharField(help_text='Hex color such as #1a2b3c', max_length=7)),
            ],
            options={
                'verbose_name': 'Color Variable',
                'verbose_name_plural': 'Color Variables',
                'db_table': 'color_vars',
                'ordering': ['name'],
            },
        ),
    ]
