"""SQLAlchemy models for the Gifted Eternity catalog.

Models are organized into domain-specific modules:
 - core.py: User, subscription tiers, payments, purchases, posts, ad metrics
 - content.py: Album, Track, Playlist, uploads, artist profiles, upload sessions
 - creator.py: CreatorEarning, CreatorPayout, Tip
 - engagement.py: favorites, listening history, shares, follows, activity feed
 - reviews.py: track/album reviews, ratings, moderation, listener badges
 - collaboration.py: CollaborationInvite, Collaborator, CollaborationActivityLog
 - notifications.py: Notification, NotificationPreference, EmailNotification, PushToken
 - admin.py: AdminUser, AdminSession, AdminActivityLog, AdminPermission, AdminSetting
 - analytics.py: plays, downloads, daily rollups, artist dashboard metrics
 - leaderboards.py: community leaderboard snapshots
 - payments.py: Stripe and PayPal records, webhook events, billing cycles
 - gamification.py: achievements, challenges, milestones, listening stats, preferences
 - listening_parties.py: ListeningParty and its participants, chat, queue, votes

Importing this package registers every table on ``Base.metadata``.
"""

# ruff: noqa: I001

from ..db import Base

# Identity, commerce and site content
from .core import (
    AdMetric,
    AlbumPurchase,
    GenreAccess,
    Payment,
    PaypalSubscription,
    Post,
    SongPurchase,
    SubscriptionTier,
    User,
    UserSubscription,
)

# Catalog and uploads
from .content import (
    Album,
    AlbumArtwork,
    ArtistProfile,
    ArtistUpload,
    MusicMetadata,
    MusicUpload,
    Playlist,
    PlaylistFollower,
    PlaylistShare,
    PlaylistTrack,
    Track,
    UploadedFile,
    UploadSession,
    UserPlaylist,
)

# Creator economy
from .creator import CreatorEarning, CreatorPayout, Tip

# Engagement and social graph
from .engagement import (
    ActivityFeedItem,
    Favorite,
    Share,
    ShareAnalytic,
    ShareEvent,
    StreamHistory,
    UserFavorite,
    UserFollow,
    UserListeningHistory,
)

# Reviews, moderation and badges
from .reviews import (
    AlbumReview,
    ArtistResponse,
    BadgeCriteriaTracking,
    ListenerBadge,
    ReviewHelpfulnessVote,
    ReviewModeration,
    TrackRating,
    TrackReview,
    UserBadgeAssignment,
)

# Collaboration
from .collaboration import CollaborationActivityLog, CollaborationInvite, Collaborator

# Notifications
from .notifications import EmailNotification, Notification, NotificationPreference, PushToken

# Administration
from .admin import AdminActivityLog, AdminPermission, AdminSession, AdminSetting, AdminUser

# Analytics and artist dashboard
from .analytics import (
    ArtistEngagementMetric,
    ArtistListenerDemographic,
    ArtistReviewTrend,
    DailyAnalyticsSummary,
    ListenerDemographic,
    MostHelpfulReview,
    RevenueTracking,
    TrackDownload,
    TrackPlay,
)

# Community leaderboards
from .leaderboards import (
    MostHelpfulCommentsLeaderboard,
    TopReviewersLeaderboard,
    TrendingArtistsLeaderboard,
    TrendingTracksLeaderboard,
)

# Payment providers
from .payments import (
    BillingCycle,
    PaymentEvent,
    PaypalAccount,
    PaypalPayout,
    StripeCustomer,
    StripeInvoice,
    StripeSubscription,
    TransactionHistory,
)

# Gamification and recommendations
from .gamification import (
    Achievement,
    Leaderboard,
    SocialChallenge,
    UserAchievement,
    UserChallengeProgress,
    UserGamificationProfile,
    UserListeningStats,
    UserMilestone,
    UserPlayEvent,
    UserPreference,
)

# Listening parties
from .listening_parties import (
    ListeningParty,
    PartyChatMessage,
    PartyParticipant,
    PartyQueueItem,
    PartyReaction,
    PartySyncEvent,
    PartyUserVote,
    PartyVote,
)

__all__ = [
    "Base",
    # core
    "AdMetric",
    "AlbumPurchase",
    "GenreAccess",
    "Payment",
    "PaypalSubscription",
    "Post",
    "SongPurchase",
    "SubscriptionTier",
    "User",
    "UserSubscription",
    # content
    "Album",
    "AlbumArtwork",
    "ArtistProfile",
    "ArtistUpload",
    "MusicMetadata",
    "MusicUpload",
    "Playlist",
    "PlaylistFollower",
    "PlaylistShare",
    "PlaylistTrack",
    "Track",
    "UploadedFile",
    "UploadSession",
    "UserPlaylist",
    # creator
    "CreatorEarning",
    "CreatorPayout",
    "Tip",
    # engagement
    "ActivityFeedItem",
    "Favorite",
    "Share",
    "ShareAnalytic",
    "ShareEvent",
    "StreamHistory",
    "UserFavorite",
    "UserFollow",
    "UserListeningHistory",
    # reviews
    "AlbumReview",
    "ArtistResponse",
    "BadgeCriteriaTracking",
    "ListenerBadge",
    "ReviewHelpfulnessVote",
    "ReviewModeration",
    "TrackRating",
    "TrackReview",
    "UserBadgeAssignment",
    # collaboration
    "CollaborationActivityLog",
    "CollaborationInvite",
    "Collaborator",
    # notifications
    "EmailNotification",
    "Notification",
    "NotificationPreference",
    "PushToken",
    # admin
    "AdminActivityLog",
    "AdminPermission",
    "AdminSession",
    "AdminSetting",
    "AdminUser",
    # analytics
    "ArtistEngagementMetric",
    "ArtistListenerDemographic",
    "ArtistReviewTrend",
    "DailyAnalyticsSummary",
    "ListenerDemographic",
    "MostHelpfulReview",
    "RevenueTracking",
    "TrackDownload",
    "TrackPlay",
    # leaderboards
    "MostHelpfulCommentsLeaderboard",
    "TopReviewersLeaderboard",
    "TrendingArtistsLeaderboard",
    "TrendingTracksLeaderboard",
    # payments
    "BillingCycle",
    "PaymentEvent",
    "PaypalAccount",
    "PaypalPayout",
    "StripeCustomer",
    "StripeInvoice",
    "StripeSubscription",
    "TransactionHistory",
    # gamification
    "Achievement",
    "Leaderboard",
    "SocialChallenge",
    "UserAchievement",
    "UserChallengeProgress",
    "UserGamificationProfile",
    "UserListeningStats",
    "UserMilestone",
    "UserPlayEvent",
    "UserPreference",
    # listening parties
    "ListeningParty",
    "PartyChatMessage",
    "PartyParticipant",
    "PartyQueueItem",
    "PartyReaction",
    "PartySyncEvent",
    "PartyUserVote",
    "PartyVote",
]
