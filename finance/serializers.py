from rest_framework import serializers
from .models import Subscription


class SubscriptionSerializer(serializers.ModelSerializer):
    screenshot = serializers.ImageField(
        write_only=True,
        error_messages={'required': "Payment screenshot is required"},
    )
    screenshot_url = serializers.SerializerMethodField()
    plan = serializers.ChoiceField(
        choices=Subscription.Plan.choices,
        error_messages={'invalid_choice': "Invalid plan", 'required': "Plan is required"},
    )

    class Meta:
        model = Subscription
        fields = [
            'id', 'plan', 'price', 'screenshot', 'screenshot_url', 'status',
            'verified_at', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'price', 'status', 'verified_at', 'created_at', 'updated_at']

    def get_screenshot_url(self, obj):
        return obj.screenshot.url if obj.screenshot else None


class AdminSubscriptionSerializer(SubscriptionSerializer):
    """
    Admin review list: who paid, for what, and the proof.
    """
    user_id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    verified_by = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta(SubscriptionSerializer.Meta):
        fields = SubscriptionSerializer.Meta.fields + ['user_id', 'username', 'email', 'verified_by']
        read_only_fields = fields


class SubscriptionVerifySerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[Subscription.Status.ACTIVE, Subscription.Status.REJECTED],
        error_messages={'invalid_choice': "Invalid status", 'required': "Invalid status"},
    )
