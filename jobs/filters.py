"""
Job listing filters shared by the job search endpoint and job alerts.

Text filters run in the database; the salary bounds run in Python because
salary is stored as free text.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from django.db.models import Q

from .salary import parse_salary

ORDERINGS = {
    'newest': ('-created_at',),
    'oldest': ('created_at',),
    'title': ('title', '-created_at'),
}
SALARY_ORDERINGS = ('salary_high', 'salary_low')

TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class JobFilters:
    keywords: List[str] = field(default_factory=list)
    location: str = ''
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    remote: bool = False
    industries: List[str] = field(default_factory=list)
    employer_id: Optional[int] = None
    ordering: str = 'newest'

    @classmethod
    def from_query_params(cls, params):
        def number(key):
            raw = params.get(key)
            if raw in (None, ''):
                return None
            try:
                return float(raw)
            except (TypeError, ValueError):
                return None

        employer_id = params.get('employer_id')
        keyword = (params.get('keyword') or '').strip()
        job_type = params.get('type') or params.get('job_type')
        experience_level = params.get('experience_level')
        return cls(
            keywords=[keyword] if keyword else [],
            location=(params.get('location') or '').strip(),
            job_type=None if job_type in (None, '', 'all') else job_type,
            experience_level=None if experience_level in (None, '', 'all') else experience_level,
            salary_min=number('salary_min'),
            salary_max=number('salary_max'),
            remote=str(params.get('remote', '')).lower() in TRUE_VALUES,
            employer_id=int(employer_id) if employer_id and str(employer_id).isdigit() else None,
            ordering=params.get('ordering') or 'newest',
        )

    @property
    def has_salary_bounds(self):
        return self.salary_min is not None or self.salary_max is not None

    def filter_queryset(self, queryset):
        if self.employer_id is not None:
            queryset = queryset.filter(employer_id=self.employer_id)

        if self.keywords:
            keyword_q = Q()
            for keyword in self.keywords:
                keyword_q |= (
                    Q(title__icontains=keyword) |
                    Q(company__icontains=keyword) |
                    Q(description__icontains=keyword)
                )
            queryset = queryset.filter(keyword_q)

        if self.location:
            queryset = queryset.filter(location__icontains=self.location)
        if self.job_type:
            queryset = queryset.filter(job_type=self.job_type)
        if self.experience_level:
            queryset = queryset.filter(experience_level=self.experience_level)
        if self.remote:
            queryset = queryset.filter(remote=True)
        if self.industries:
            industry_q = Q()
            for industry in self.industries:
                industry_q |= Q(employer__industry__iexact=industry)
            queryset = queryset.filter(industry_q)

        return queryset.order_by(*ORDERINGS.get(self.ordering, ORDERINGS['newest']))

    def salary_matches(self, job):
        if not self.has_salary_bounds:
            return True
        amount = parse_salary(job.salary)
        if amount is None:
            return False
        if self.salary_min is not None and amount < self.salary_min:
            return False
        if self.salary_max is not None and amount > self.salary_max:
            return False
        return True

    def apply(self, queryset):
        """
        Returns the matching jobs as a list, ordered as requested.
        """
        jobs = [job for job in self.filter_queryset(queryset) if self.salary_matches(job)]
        if self.ordering in SALARY_ORDERINGS:
            jobs.sort(
                key=lambda job: parse_salary(job.salary) or 0,
                reverse=self.ordering == 'salary_high',
            )
        return jobs
