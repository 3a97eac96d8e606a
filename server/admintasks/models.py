"""
Recurring administrative task tracking.
"""
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class TaskFrequency(models.IntegerChoices):
    MONTHLY = 0, 'Monthly'
    QUARTERLY = 1, 'Quarterly'
    ANNUALLY = 2, 'Annually'
    AS_NEEDED = 3, 'As Needed'


class TaskPriority(models.IntegerChoices):
    LOW = 0, 'Low'
    MEDIUM = 1, 'Medium'
    HIGH = 2, 'High'


class TaskStatus(models.IntegerChoices):
    PENDING = 0, 'Pending'
    IN_PROGRESS = 1, 'In Progress'
    COMPLETED = 2, 'Completed'
    SKIPPED = 3, 'Skipped'


class AdminTask(models.Model):
    """A recurring chore; one AdminTaskInstance is tracked per month."""
    task_name = models.CharField(max_length=200)
    description = models.CharField(max_length=1000, null=True, blank=True)
    frequency = models.IntegerField(choices=TaskFrequency.choices, default=TaskFrequency.MONTHLY)
    day_of_month_start = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1), MaxValueValidator(31)]
    )
    day_of_month_end = models.PositiveSmallIntegerField(
        default=31,
        validators=[MinValueValidator(1), MaxValueValidator(31)]
    )
    priority = models.IntegerField(choices=TaskPriority.choices, default=TaskPriority.MEDIUM)
    page_url = models.CharField(max_length=200, null=True, blank=True)
    action_handler = models.CharField(max_length=100, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    can_automate = models.BooleanField(default=False)
    is_automated = models.BooleanField(default=False)
    date_created = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'admin_tasks'
        verbose_name = _('Admin Task')
        verbose_name_plural = _('Admin Tasks')
        ordering = ['-priority', 'task_name']

    def __str__(self):
        return self.task_name


class AdminTaskInstance(models.Model):
    task = models.ForeignKey(
        AdminTask,
        on_delete=models.CASCADE,
        related_name='instances'
    )
    year = models.PositiveSmallIntegerField()
    month = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])
    status = models.IntegerField(choices=TaskStatus.choices, default=TaskStatus.PENDING)
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_admin_tasks'
    )
    completed_date = models.DateTimeField(null=True, blank=True)
    completed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='completed_admin_tasks'
    )
    notes = models.CharField(max_length=1000, null=True, blank=True)
    is_automated_completion = models.BooleanField(default=False)
    date_created = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'admin_task_instances'
        verbose_name = _('Admin Task Instance')
        verbose_name_plural = _('Admin Task Instances')
        ordering = ['-year', '-month']
        constraints = [
            models.UniqueConstraint(fields=['task', 'year', 'month'], name='admin_task_instance_period_uniq'),
            models.CheckConstraint(
                condition=models.Q(month__gte=1, month__lte=12),
                name='admin_task_instance_month_range',
            ),
        ]

    def __str__(self):
        return f"{self.task.task_name} {self.year}-{self.month:02d} ({self.get_status_display()})"

    def mark_completed(self, user=None, automated=False):
        """Record completion by a user or by an automated handler."""
        self.status = TaskStatus.COMPLETED
        self.completed_date = timezone.now()
        self.completed_by = user
        self.is_automated_completion = automated
        self.save(update_fields=['status', 'completed_date', 'completed_by', 'is_automated_completion', 'last_updated'])


class TaskStatusMessage(models.Model):
    """Tracks when a staff member dismissed the pending-tasks banner."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='task_status_messages'
    )
    dismissed_at = models.DateTimeField(default=timezone.now)
    dismissal_count = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'task_status_messages'
        verbose_name = _('Task Status Message')
        verbose_name_plural = _('Task Status Messages')

    def __str__(self):
        return f"{self.user.username} dismissed {self.dismissal_count}x"
