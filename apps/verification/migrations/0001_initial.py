from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='VerificationCode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('subject_id', models.CharField(max_length=64)),
                ('purpose', models.CharField(choices=[('cancel-booking', 'Cancel booking')], max_length=32)),
                ('code', models.CharField(max_length=6)),
                ('issued_at', models.DateTimeField()),
                ('expires_at', models.DateTimeField()),
                ('consumed', models.BooleanField(default=False)),
            ],
            options={
                'verbose_name': 'Verification code',
                'verbose_name_plural': 'Verification codes',
                'ordering': ['-issued_at'],
            },
        ),
        migrations.AddIndex(
            model_name='verificationcode',
            index=models.Index(fields=['expires_at'], name='verification_expires_idx'),
        ),
        migrations.AddConstraint(
            model_name='verificationcode',
            constraint=models.UniqueConstraint(
                fields=('subject_id', 'purpose'),
                name='verification_one_code_per_subject_purpose',
            ),
        ),
    ]
