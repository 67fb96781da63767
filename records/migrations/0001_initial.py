from django.db import migrations, models

import records.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.CharField(default=records.models.new_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('reg_id', models.CharField(max_length=16)),
                ('patient_id', models.CharField(db_index=True, max_length=16)),
                ('name', models.CharField(max_length=255)),
                ('age', models.PositiveIntegerField()),
                ('gender', models.CharField(max_length=20)),
                ('phone', models.CharField(max_length=32)),
                ('email', models.CharField(max_length=255)),
                ('address', models.CharField(max_length=500)),
                ('blood_group', models.CharField(max_length=5)),
                ('date_of_birth', models.DateField()),
                ('allergy', models.TextField(blank=True, default='')),
                ('medical_history', models.TextField(blank=True, default='')),
                ('insurance', models.CharField(blank=True, default='', max_length=255)),
            ],
            options={
                'db_table': 'records_patient',
                'ordering': ('created_at', 'id'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='MedicalReport',
            fields=[
                ('id', models.CharField(default=records.models.new_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('report_id', models.CharField(max_length=32)),
                ('patient_id', models.CharField(db_index=True, max_length=16)),
                ('doctor_name', models.CharField(max_length=255)),
                ('report_date', models.DateField()),
                ('diagnosis', models.TextField()),
                ('treatment', models.TextField()),
            ],
            options={
                'db_table': 'records_medical_report',
                'ordering': ('created_at', 'id'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='InsuranceForm',
            fields=[
                ('id', models.CharField(default=records.models.new_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('form_id', models.CharField(max_length=16)),
                ('current_date', models.DateField()),
                ('patient_id', models.CharField(db_index=True, max_length=16)),
                ('patient_name', models.CharField(max_length=255)),
                ('date_of_birth', models.DateField()),
                ('gender', models.CharField(max_length=20)),
                ('contact_number', models.CharField(max_length=32)),
                ('insurance_company', models.CharField(max_length=255)),
                ('policy_number', models.CharField(max_length=32)),
                ('total_charges', models.FloatField()),
                ('amount_paid_by_patient', models.FloatField()),
                ('additional_notes', models.TextField(blank=True, default='')),
            ],
            options={
                'db_table': 'records_insurance_form',
                'ordering': ('created_at', 'id'),
                'abstract': False,
            },
        ),
    ]
