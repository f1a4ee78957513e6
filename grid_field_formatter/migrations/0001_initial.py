from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FieldDisplayComponent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('entity_type', models.CharField(max_length=100)),
                ('bundle', models.CharField(max_length=100)),
                ('view_mode', models.CharField(default='default', max_length=100)),
                ('field_name', models.CharField(max_length=255)),
                ('formatter', models.CharField(blank=True, default='', max_length=100)),
                ('settings', models.JSONField(blank=True, default=dict)),
                ('third_party_settings', models.JSONField(blank=True, default=dict)),
            ],
            options={
                'verbose_name': 'Field display component',
                'verbose_name_plural': 'Field display components',
            },
        ),
        migrations.AddConstraint(
            model_name='fielddisplaycomponent',
            constraint=models.UniqueConstraint(fields=('entity_type', 'bundle', 'view_mode', 'field_name'), name='unique_field_display_component'),
        ),
    ]
