# Generated manually for the initial content schema

import django.core.validators
from django.db import migrations
from django.db import models


def timestamps():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
        ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Testimonial',
            fields=[
                *timestamps(),
                ('order', models.PositiveIntegerField(db_index=True, default=0, verbose_name='Order')),
                ('partner_name', models.CharField(max_length=255, verbose_name='Partner name')),
                ('logo_url', models.CharField(blank=True, max_length=500, verbose_name='Logo')),
                ('quote', models.TextField(verbose_name='Quote')),
                (
                    'rating',
                    models.PositiveSmallIntegerField(
                        default=5,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                        verbose_name='Rating',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Testimonial',
                'verbose_name_plural': 'Testimonials',
                'ordering': ['order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Faq',
            fields=[
                *timestamps(),
                ('order', models.PositiveIntegerField(db_index=True, default=0, verbose_name='Order')),
                ('question', models.CharField(max_length=500, verbose_name='Question')),
                ('answer', models.TextField(verbose_name='Answer')),
            ],
            options={
                'verbose_name': 'FAQ',
                'verbose_name_plural': 'FAQs',
                'ordering': ['order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Initiative',
            fields=[
                *timestamps(),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('image_url', models.CharField(blank=True, max_length=500, verbose_name='Image')),
                ('logo_url', models.CharField(blank=True, max_length=500, verbose_name='Logo')),
                ('website_url', models.URLField(blank=True, max_length=500, verbose_name='Website')),
                ('locations', models.JSONField(blank=True, default=list, verbose_name='Locations')),
                ('start_date', models.DateField(blank=True, null=True, verbose_name='Start date')),
                ('specializations', models.JSONField(blank=True, default=list, verbose_name='Specializations')),
                ('social_links', models.JSONField(blank=True, default=list, verbose_name='Social links')),
            ],
            options={
                'verbose_name': 'Initiative',
                'verbose_name_plural': 'Initiatives',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='PressArticle',
            fields=[
                *timestamps(),
                ('publication', models.CharField(max_length=255, verbose_name='Publication')),
                ('logo_url', models.CharField(blank=True, max_length=500, verbose_name='Logo')),
                ('title', models.CharField(max_length=500, verbose_name='Title')),
                ('url', models.URLField(max_length=500, verbose_name='Article URL')),
                ('date', models.DateField(blank=True, null=True, verbose_name='Publication date')),
                ('featured', models.BooleanField(default=False, verbose_name='Featured')),
            ],
            options={
                'verbose_name': 'Press article',
                'verbose_name_plural': 'Press articles',
                'ordering': ['-featured', '-date'],
            },
        ),
        migrations.CreateModel(
            name='MediaHighlight',
            fields=[
                *timestamps(),
                ('title', models.CharField(max_length=500, verbose_name='Title')),
                ('media_name', models.CharField(max_length=255, verbose_name='Media name')),
                ('date', models.DateField(blank=True, null=True, verbose_name='Broadcast date')),
                ('video_id', models.CharField(blank=True, max_length=100, verbose_name='Video ID')),
                ('url', models.URLField(blank=True, max_length=500, verbose_name='URL')),
                ('media_logo', models.CharField(blank=True, max_length=500, verbose_name='Media logo')),
                ('image_url', models.CharField(blank=True, max_length=500, verbose_name='Image')),
            ],
            options={
                'verbose_name': 'Media highlight',
                'verbose_name_plural': 'Media highlights',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='Partner',
            fields=[
                *timestamps(),
                ('name', models.CharField(max_length=255, unique=True, verbose_name='Name')),
                ('logo_url', models.CharField(blank=True, max_length=500, verbose_name='Logo')),
                ('website_url', models.URLField(blank=True, max_length=500, verbose_name='Website')),
                ('collaboration_date', models.DateField(blank=True, null=True, verbose_name='Collaboration since')),
                ('specializations', models.JSONField(blank=True, default=list, verbose_name='Specializations')),
                ('locations', models.JSONField(blank=True, default=list, verbose_name='Locations')),
                ('resources', models.JSONField(blank=True, default=list, verbose_name='Resources')),
                (
                    'collaboration_status',
                    models.CharField(blank=True, max_length=100, verbose_name='Collaboration status'),
                ),
            ],
            options={
                'verbose_name': 'Partner',
                'verbose_name_plural': 'Partners',
                'ordering': ['-created_at'],
            },
        ),
    ]
