from django.db import models
from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.utils.translation import gettext_lazy as _


class UserManager(DjangoUserManager):
    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault('role', User.Roles.ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    """
    Custom User Model for the job board.
    A single role per account: Job Seeker, Employer or platform Admin.
    Employers carry their company branding directly on the account.
    """

    class Roles(models.TextChoices):
        SEEKER = 'seeker', _('Job Seeker')
        EMPLOYER = 'employer', _('Employer')
        ADMIN = 'admin', _('Admin')

    # Basic Info
    email = models.EmailField(_("Email Address"), unique=True)
    role = models.CharField(max_length=20, choices=Roles.choices, default=Roles.SEEKER)
    phone = models.CharField(max_length=20, blank=True, null=True)

    # Seeker profile
    bio = models.TextField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True, null=True)
    resume_url = models.CharField(max_length=500, blank=True, null=True)
    education = models.JSONField(default=list, blank=True)
    experience = models.JSONField(default=list, blank=True)
    skills = models.JSONField(default=list, blank=True)  # e.g. ["Python", "React"]

    # Employer branding
    company_name = models.CharField(max_length=255, blank=True, null=True)
    company_size = models.CharField(max_length=50, blank=True, null=True)
    industry = models.CharField(max_length=100, blank=True, null=True)
    founded = models.CharField(max_length=20, blank=True, null=True)
    website = models.CharField(max_length=255, blank=True, null=True)
    company_description = models.TextField(blank=True, null=True)
    benefits = models.TextField(blank=True, null=True)
    culture = models.TextField(blank=True, null=True)
    logo = models.ImageField(upload_to='company_logos/', blank=True, null=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    def __str__(self):
        return f"{self.email} ({self.role})"

    @property
    def is_seeker(self):
        return self.role == self.Roles.SEEKER

    @property
    def is_employer(self):
        return self.role == self.Roles.EMPLOYER

    @property
    def is_platform_admin(self):
        return self.role == self.Roles.ADMIN

    @property
    def current_plan(self):
        """Plan of the most recently verified subscription, 'free' otherwise."""
        active = (
            self.subscriptions.filter(status='active')
            .order_by('-verified_at', '-created_at')
            .first()
        )
        return active.plan if active else 'free'
