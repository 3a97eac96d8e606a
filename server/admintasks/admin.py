"""
Admin configuration for admintasks app.
"""
from django.contrib import admin
from .models import AdminTask, AdminTaskInstance, TaskStatus, TaskStatusMessage


class AdminTaskInstanceInline(admin.TabularInline):
    model = AdminTaskInstance
    extra = 0
    fields = ['year', 'month', 'status', 'assigned_to', 'completed_date']


@admin.register(AdminTask)
class AdminTaskAdmin(admin.ModelAdmin):
    list_display = ['task_name', 'frequency', 'priority', 'is_active', 'can_automate', 'is_automated']
    list_filter = ['frequency', 'priority', 'is_active']
    search_fields = ['task_name', 'description']
    inlines = [AdminTaskInstanceInline]


@admin.register(AdminTaskInstance)
class AdminTaskInstanceAdmin(admin.ModelAdmin):
    """Admin interface for AdminTaskInstance model."""
    list_display = ['task', 'year', 'month', 'status', 'assigned_to', 'completed_by', 'completed_date']
    list_filter = ['status', 'year', 'month']
    search_fields = ['task__task_name', 'notes']
    readonly_fields = ['date_created', 'last_updated']

    actions = ['mark_completed']

    def get_queryset(self, request):
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('task', 'assigned_to', 'completed_by')

    def mark_completed(self, request, queryset):
        count = 0
        for instance in queryset.exclude(status=TaskStatus.COMPLETED):
            instance.mark_completed(user=request.user)
            count += 1
        self.message_user(request, f'{count} tasks marked completed.')

    mark_completed.short_description = 'Mark selected tasks completed'


@admin.register(TaskStatusMessage)
class TaskStatusMessageAdmin(admin.ModelAdmin):
    list_display = ['user', 'dismissed_at', 'dismissal_count']
