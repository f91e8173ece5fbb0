import io

import pytest
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from jobs.models import Job
from users.models import User


def build_pdf(lines):
    """
    A one page PDF with each line of text on its own row.
    """
    def escape(text):
        return text.replace('\\', '\\\\').replace('(', '\\(').replace(')', '\\)')

    stream = "BT /F1 12 Tf 14 TL 72 720 Td " + " ".join(f"({escape(line)}) Tj T*" for line in lines) + " ET"
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        "/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    output = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(output))
        output += f"{number} 0 obj\n{body}\nendobj\n".encode('latin-1')

    xref_at = len(output)
    output += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode('latin-1')
    for offset in offsets:
        output += f"{offset:010d} 00000 n \n".encode('latin-1')
    output += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n"
    ).encode('latin-1')
    return output


RESUME_LINES = [
    "Jane Seeker",
    "Skills: Python, Django, SQL, React",
    "",
    "Experience",
    "Backend Engineer 2016 - 2021",
    "Software Developer 2021 - present",
]


# Structurally broken variants of build_pdf(); PyPDF2 raises a different error for each.
BROKEN_PDF_EDITS = [
    (b'/Root 1 0 R', b'/Root 9 0 R'),
    (b'/Kids [3 0 R]', b'/Kids 7'),
    (b'/Contents 4 0 R', b'/Contents 5 0 R'),
    (b'/Kids [3 0 R]', b'/Kids [2 0 R]'),
]


def broken_pdf(edit, lines=RESUME_LINES):
    old, new = edit
    return build_pdf(lines).replace(old, new)


def png_bytes(color='blue'):
    buffer = io.BytesIO()
    Image.new('RGB', (10, 10), color).save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def _isolated(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / 'uploads')
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
    settings.TWILIO_ACCOUNT_SID = ''
    settings.TWILIO_AUTH_TOKEN = ''
    settings.TWILIO_FROM_NUMBER = ''
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def seeker(db):
    return User.objects.create_user(
        username='jane', email='jane@example.com', password='secret123',
        role=User.Roles.SEEKER, phone='+15550001111',
        skills=['Python', 'Django'],
    )


@pytest.fixture
def other_seeker(db):
    return User.objects.create_user(
        username='john', email='john@example.com', password='secret123', role=User.Roles.SEEKER,
    )


@pytest.fixture
def employer(db):
    return User.objects.create_user(
        username='acme', email='hr@acme.com', password='secret123',
        role=User.Roles.EMPLOYER, company_name='Acme Corp', industry='Software',
    )


@pytest.fixture
def other_employer(db):
    return User.objects.create_user(
        username='globex', email='hr@globex.com', password='secret123',
        role=User.Roles.EMPLOYER, company_name='Globex', industry='Finance',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(username='root', email='root@example.com', password='secret123')


@pytest.fixture
def seeker_client(api_client, seeker):
    api_client.force_authenticate(seeker)
    return api_client


@pytest.fixture
def employer_client(api_client, employer):
    api_client.force_authenticate(employer)
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(admin_user)
    return api_client


@pytest.fixture
def job(employer):
    return Job.objects.create(
        employer=employer,
        title='Backend Engineer',
        description='Build software services for our platform.',
        company='Acme Corp',
        location='Lagos',
        salary='$80k - $100k',
        job_type=Job.JobType.FULL_TIME,
        requirements=['backend'],
        skills=['Python', 'Django'],
        experience_level=Job.ExperienceLevel.MID,
    )


@pytest.fixture
def resume_pdf():
    return SimpleUploadedFile('resume.pdf', build_pdf(RESUME_LINES), content_type='application/pdf')


@pytest.fixture
def make_resume():
    def factory(lines=RESUME_LINES, name='resume.pdf'):
        return SimpleUploadedFile(name, build_pdf(lines), content_type='application/pdf')
    return factory


@pytest.fixture
def image_file():
    def factory(name='image.png', color='blue'):
        return SimpleUploadedFile(name, png_bytes(color), content_type='image/png')
    return factory
