from django.contrib.auth import get_user_model
from django.db.models import Avg, Count, Q
from rest_framework.exceptions import NotFound

from jobs.salary import parse_salary

User = get_user_model()


def employers(search=None):
    """
    Employer accounts annotated with their review aggregates.
    """
    queryset = User.objects.filter(role=User.Roles.EMPLOYER)
    if search:
        queryset = queryset.filter(Q(company_name__icontains=search) | Q(industry__icontains=search))
    return (
        queryset
        .annotate(avg_rating=Avg('company_reviews__rating'), review_count=Count('company_reviews', distinct=True))
        .order_by('company_name', 'id')
    )


def get_employer_or_404(employer_id):
    try:
        return employers().get(pk=employer_id)
    except User.DoesNotExist:
        raise NotFound("Company not found")


def _format_amount(amount):
    if amount >= 1000:
        return f"${amount / 1000:g}k"
    return f"${amount:g}"


def salary_range(employer):
    """
    Lowest to highest salary advertised across the employer's jobs.
    """
    amounts = sorted(
        amount for amount in (parse_salary(job.salary) for job in employer.posted_jobs.all())
        if amount is not None
    )
    if not amounts:
        return "Not disclosed"
    if amounts[0] == amounts[-1]:
        return _format_amount(amounts[0])
    return f"{_format_amount(amounts[0])} - {_format_amount(amounts[-1])}"
