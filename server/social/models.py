"""
Social models for Fish-Smart.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class FishingBuddy(models.Model):
    """
    Buddy link between two anglers.
    The owner sends the request; once accepted the link counts both ways.
    Declining, removing and unblocking delete the row.
    """
    STATUS_CHOICES = [
        ('Pending', 'Pending'),
        ('Accepted', 'Accepted'),
        ('Blocked', 'Blocked'),
    ]

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sent_buddy_requests',
        help_text=_('User who sent the buddy request')
    )
    buddy = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='received_buddy_requests',
        help_text=_('User who received the buddy request')
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='Pending'
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'fishing_buddies'
        verbose_name = _('Fishing Buddy')
        verbose_name_plural = _('Fishing Buddies')
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['owner', 'buddy'], name='fishing_buddies_owner_buddy_uniq'),
            models.CheckConstraint(
                condition=~models.Q(owner=models.F('buddy')),
                name='fishing_buddies_not_self',
            ),
        ]
        indexes = [
            models.Index(fields=['buddy', 'status'], name='fishing_buddies_buddy_idx'),
        ]

    def __str__(self):
        return f"{self.owner.username} → {self.buddy.username} ({self.status})"

    @classmethod
    def are_buddies(cls, user1, user2):
        """Check if two users are buddies (bidirectional check)."""
        return cls.objects.filter(
            models.Q(owner=user1, buddy=user2, status='Accepted') |
            models.Q(owner=user2, buddy=user1, status='Accepted')
        ).exists()

    @classmethod
    def get_buddy_ids(cls, user):
        """Get IDs of every accepted buddy of a user."""
        sent = cls.objects.filter(owner=user, status='Accepted').values_list('buddy_id', flat=True)
        received = cls.objects.filter(buddy=user, status='Accepted').values_list('owner_id', flat=True)
        return list(sent) + list(received)

    @classmethod
    def get_pending_requests(cls, user):
        """Get pending requests the user has received."""
        return cls.objects.filter(buddy=user, status='Pending').select_related('owner')

    @classmethod
    def create_request(cls, owner, buddy):
        """
        Create a buddy request.
        Checks for existing relationships in either direction first.
        """
        if owner.pk == buddy.pk:
            raise ValueError("You cannot add yourself as a fishing buddy")

        existing = cls.objects.filter(
            models.Q(owner=owner, buddy=buddy) |
            models.Q(owner=buddy, buddy=owner)
        ).first()

        if existing:
            if existing.status == 'Accepted':
                raise ValueError("Users are already fishing buddies")
            elif existing.status == 'Pending':
                raise ValueError("Buddy request already pending")
            elif existing.status == 'Blocked':
                raise ValueError("Cannot send buddy request")

        return cls.objects.create(owner=owner, buddy=buddy, status='Pending')

    def accept(self):
        """Accept a buddy request."""
        if self.status != 'Pending':
            raise ValueError("Only pending requests can be accepted")
        self.status = 'Accepted'
        self.save(update_fields=['status'])

    def decline(self):
        """Decline a buddy request (delete the record)."""
        if self.status != 'Pending':
            raise ValueError("Only pending requests can be declined")
        self.delete()

    def block(self):
        """Block the other user (from any state)."""
        self.status = 'Blocked'
        self.save(update_fields=['status'])

    def unblock(self):
        """Lift a block (delete the record)."""
        if self.status != 'Blocked':
            raise ValueError("Only blocked users can be unblocked")
        self.delete()

    def remove(self):
        """Remove a buddy (delete the record)."""
        if self.status != 'Accepted':
            raise ValueError("Only accepted buddies can be removed")
        self.delete()
