"""Closed literal domains for status, role and type columns.

Values are the exact strings stored in the database.
"""

from enum import Enum


# ============================================================================
# IDENTITY & COMMERCE
# ============================================================================


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class SubscriptionStatus(str, Enum):
    """Lifecycle of a tier subscription billed through Stripe."""

    ACTIVE = "active"
    CANCELED = "canceled"
    PAST_DUE = "past_due"
    TRIALING = "trialing"


class PaypalSubscriptionStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CANCELLED = "cancelled"  # PayPal spelling
    EXPIRED = "expired"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PostType(str, Enum):
    """Homepage content kinds."""

    POST = "post"
    TESTIMONIAL = "testimonial"
    ARTWORK = "artwork"


# ============================================================================
# CONTENT
# ============================================================================


class UploadedFileType(str, Enum):
    AUDIO = "audio"
    IMAGE = "image"
    VIDEO = "video"


class MusicUploadStatus(str, Enum):
    DRAFT = "draft"
    PROCESSING = "processing"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ArtworkStatus(str, Enum):
    DRAFT = "draft"
    APPROVED = "approved"
    PUBLISHED = "published"


class UploadSessionStatus(str, Enum):
    PENDING = "pending"
    UPLOADING = "uploading"
    COMPLETED = "completed"
    FAILED = "failed"


# ============================================================================
# CREATOR ECONOMY
# ============================================================================


class EarningType(str, Enum):
    STREAMS = "streams"
    DOWNLOADS = "downloads"
    TIPS = "tips"
    MERCHANDISE = "merchandise"


class CreatorPayoutStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class TipPaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


# ============================================================================
# ENGAGEMENT, SOCIAL & NOTIFICATIONS
# ============================================================================


class SharePlatform(str, Enum):
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    WHATSAPP = "whatsapp"
    EMAIL = "email"
    LINK = "link"


class ActivityType(str, Enum):
    FOLLOW = "follow"
    LIKE = "like"
    COMMENT = "comment"
    SHARE = "share"
    UPLOAD = "upload"


class EmailNotificationType(str, Enum):
    NEW_TRACK = "new_track"
    ARTIST_UPDATE = "artist_update"
    PLAYLIST_SHARED = "playlist_shared"
    COMMENT_REPLY = "comment_reply"
    NEW_FOLLOWER = "new_follower"


class PushPlatform(str, Enum):
    IOS = "ios"
    ANDROID = "android"
    WEB = "web"


class NotificationType(str, Enum):
    """Types of in-app notifications."""

    REVIEW_RESPONSE = "review_response"
    BADGE_EARNED = "badge_earned"
    NEW_RELEASE = "new_release"
    COLLABORATION_INVITE = "collaboration_invite"
    COMMENT_REPLY = "comment_reply"
    FOLLOW = "follow"
    MENTION = "mention"
    MESSAGE = "message"


# ============================================================================
# REVIEWS, MODERATION & COLLABORATION
# ============================================================================


class ModerationStatus(str, Enum):
    """Review flag workflow. Transitions are made by moderators, never automatically."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    RESOLVED = "resolved"


class CollaboratorRole(str, Enum):
    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"


class InviteStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    REVOKED = "revoked"


class LeaderboardPeriod(str, Enum):
    """Window of a community leaderboard snapshot."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ALLTIME = "alltime"


# ============================================================================
# PAYMENT PROVIDERS
# ============================================================================


class PaymentProvider(str, Enum):
    STRIPE = "stripe"
    PAYPAL = "paypal"


class StripeSubscriptionStatus(str, Enum):
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    OPEN = "open"
    PAID = "paid"
    VOID = "void"
    UNCOLLECTIBLE = "uncollectible"


class PaypalAccountStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    SUSPENDED = "suspended"


class PaypalPayoutStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"


class TransactionType(str, Enum):
    SUBSCRIPTION_CHARGE = "subscription_charge"
    ROYALTY_PAYOUT = "royalty_payout"
    REFUND = "refund"
    ADJUSTMENT = "adjustment"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class BillingCycleStatus(str, Enum):
    PENDING = "pending"
    CHARGED = "charged"
    FAILED = "failed"
    REFUNDED = "refunded"


# ============================================================================
# GAMIFICATION & RECOMMENDATIONS
# ============================================================================


class AchievementCategory(str, Enum):
    LISTENING = "listening"
    SOCIAL = "social"
    DISCOVERY = "discovery"
    ENGAGEMENT = "engagement"


class LeaderboardType(str, Enum):
    ALL_TIME = "all_time"
    MONTHLY = "monthly"
    WEEKLY = "weekly"


class MilestoneType(str, Enum):
    FIRST_LISTEN = "first_listen"
    PLAYS_100 = "plays_100"
    PLAYS_1000 = "plays_1000"
    ANNIVERSARY = "anniversary"
    FOLLOWER_MILESTONE = "follower_milestone"


class ChallengeType(str, Enum):
    LISTEN = "listen"
    SHARE = "share"
    INVITE = "invite"
    CREATE_PLAYLIST = "create_playlist"


class NotificationFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    NEVER = "never"


class RecommendationStyle(str, Enum):
    DISCOVERY = "discovery"
    FAMILIAR = "familiar"
    BALANCED = "balanced"


# ============================================================================
# LISTENING PARTIES
# ============================================================================


class PartyStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


class ParticipantRole(str, Enum):
    HOST = "host"
    PARTICIPANT = "participant"
    MODERATOR = "moderator"


class ChatMessageType(str, Enum):
    TEXT = "text"
    REACTION = "reaction"
    SYSTEM = "system"


class QueueItemStatus(str, Enum):
    QUEUED = "queued"
    PLAYING = "playing"
    PLAYED = "played"
    SKIPPED = "skipped"


class VoteType(str, Enum):
    SKIP = "skip"
    PAUSE = "pause"
    RESUME = "resume"


class VoteStatus(str, Enum):
    ACTIVE = "active"
    PASSED = "passed"
    FAILED = "failed"


class VoteChoice(str, Enum):
    FOR = "for"
    AGAINST = "against"


class SyncEventType(str, Enum):
    PLAY = "play"
    PAUSE = "pause"
    SKIP = "skip"
    SEEK = "seek"
    TRACK_CHANGE = "track_change"
