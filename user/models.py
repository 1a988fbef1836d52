from django.db import models
from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin
)


class UserManager(BaseUserManager):
    """User manager keyed by phone number"""
    def create_user(self, phone, password=None, **extra_fields):
        """Create a regular account"""
        if not phone:
            raise ValueError('Phone number is required')
        user = self.model(phone=phone, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, phone, password=None, **extra_fields):
        """Create the system administrator"""
        extra_fields.setdefault('role', User.ROLE_ADMIN)
        extra_fields.setdefault('status', 'active')
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(phone, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Clinic account (patients and staff)"""
    ROLE_PATIENT = 'patient'
    ROLE_DOCTOR = 'doctor'
    ROLE_NURSE = 'nurse'
    ROLE_RECEPTIONIST = 'receptionist'
    ROLE_ADMIN = 'admin'

    ROLE_CHOICES = [
        (ROLE_PATIENT, 'Patient'),
        (ROLE_DOCTOR, 'Doctor'),
        (ROLE_NURSE, 'Nurse'),
        (ROLE_RECEPTIONIST, 'Receptionist'),
        (ROLE_ADMIN, 'Admin'),
    ]
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('pending', 'Pending verification'),
        ('inactive', 'Disabled'),
    ]

    phone = models.CharField('phone', max_length=20, unique=True)
    name = models.CharField('name', max_length=100)
    email = models.EmailField('email', blank=True)
    role = models.CharField('role', max_length=20, choices=ROLE_CHOICES, default=ROLE_PATIENT)
    status = models.CharField('status', max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField('created at', auto_now_add=True)
    updated_at = models.DateTimeField('updated at', auto_now=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)

    objects = UserManager()
    USERNAME_FIELD = 'phone'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'user'
        verbose_name = 'user'
        verbose_name_plural = 'users'

    def __str__(self):
        return f'{self.name}({self.phone})'
