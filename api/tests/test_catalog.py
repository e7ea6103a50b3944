"""Introspection of the declared schema."""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from gifted_eternity import catalog
from gifted_eternity.catalog import DeletePolicy, ForeignKeyRule

# trackReviews and musicUploads are each declared once, with the union of their columns
EXPECTED_TABLES = {
    "achievements",
    "activityFeed",
    "adMetrics",
    "adminActivityLog",
    "adminPermissions",
    "adminSessions",
    "adminSettings",
    "adminUsers",
    "albumArtwork",
    "albumPurchases",
    "albumReviews",
    "albums",
    "artistEngagementMetrics",
    "artistListenerDemographics",
    "artistProfiles",
    "artistResponses",
    "artistReviewTrends",
    "artistUploads",
    "badgeCriteriaTracking",
    "billing_cycles",
    "collaborationActivityLog",
    "collaborationInvites",
    "collaborators",
    "creatorEarnings",
    "creatorPayouts",
    "dailyAnalyticsSummary",
    "emailNotifications",
    "favorites",
    "genreAccess",
    "leaderboards",
    "listenerBadges",
    "listenerDemographics",
    "listening_parties",
    "mostHelpfulCommentsLeaderboard",
    "mostHelpfulReviews",
    "musicMetadata",
    "musicUploads",
    "notificationPreferences",
    "notifications",
    "party_chat_messages",
    "party_participants",
    "party_playlist_queue",
    "party_reactions",
    "party_sync_events",
    "party_user_votes",
    "party_voting",
    "payment_events",
    "payments",
    "paypalSubscriptions",
    "paypal_accounts",
    "paypal_payouts",
    "playlistFollowers",
    "playlistShares",
    "playlistTracks",
    "playlists",
    "posts",
    "pushTokens",
    "revenueTracking",
    "reviewHelpfulnessVotes",
    "reviewModeration",
    "shareAnalytics",
    "shareEvents",
    "shares",
    "social_challenges",
    "songPurchases",
    "streamHistory",
    "stripe_customers",
    "stripe_invoices",
    "stripe_subscriptions",
    "subscriptionTiers",
    "tips",
    "topReviewersLeaderboard",
    "trackDownloads",
    "trackPlays",
    "trackRatings",
    "trackReviews",
    "tracks",
    "transaction_history",
    "trendingArtistsLeaderboard",
    "trendingTracksLeaderboard",
    "uploadSessions",
    "uploadedFiles",
    "userBadgeAssignments",
    "userFavorites",
    "userFollows",
    "userListeningHistory",
    "userPlaylists",
    "userSubscriptions",
    "user_achievements",
    "user_challenge_progress",
    "user_gamification_profile",
    "user_listening_history",
    "user_listening_stats",
    "user_milestones",
    "user_preferences",
    "users",
}


def _rule(child_table: str, child_column: str) -> ForeignKeyRule:
    matches = [
        rule
        for rule in catalog.foreign_keys()
        if rule.child_table == child_table and rule.child_column == child_column
    ]
    assert len(matches) == 1, f"{child_table}.{child_column}: {matches}"
    return matches[0]


def test_every_table_is_declared():
    assert catalog.table_names() == sorted(EXPECTED_TABLES)


def test_create_all_materialises_every_table(engine: Engine):
    assert sorted(inspect(engine).get_table_names()) == catalog.table_names()


def test_every_primary_key_is_a_surrogate_integer():
    for table in catalog.get_metadata().sorted_tables:
        primary_key = list(table.primary_key.columns)
        assert [column.name for column in primary_key] == ["id"], table.name
        assert primary_key[0].type.python_type is int, table.name


def test_restrict_foreign_keys_are_exactly_the_tier_references():
    restricted = {
        (rule.child_table, rule.child_column)
        for rule in catalog.foreign_keys()
        if rule.policy is DeletePolicy.RESTRICT
    }

    assert restricted == {
        ("userSubscriptions", "tierId"),
        ("paypalSubscriptions", "tierId"),
        ("payments", "tierId"),
        ("genreAccess", "tierId"),
    }
    for child_table, child_column in restricted:
        assert _rule(child_table, child_column).parent_table == "subscriptionTiers"


def test_delete_policies():
    assert _rule("tracks", "artistId").policy is DeletePolicy.CASCADE
    assert _rule("tracks", "albumId").policy is DeletePolicy.SET_NULL
    assert _rule("musicUploads", "uploadedBy").policy is DeletePolicy.CASCADE
    assert _rule("trackPlays", "userId").policy is DeletePolicy.SET_NULL
    assert _rule("trackPlays", "musicUploadId").policy is DeletePolicy.CASCADE
    assert _rule("creatorEarnings", "trackId").policy is DeletePolicy.SET_NULL
    assert _rule("reviewModeration", "reviewedBy").policy is DeletePolicy.SET_NULL
    assert _rule("mostHelpfulReviews", "reviewId").policy is DeletePolicy.SET_NULL
    assert _rule("payment_events", "user_id").policy is DeletePolicy.SET_NULL
    assert _rule("stripe_invoices", "stripe_subscription_id").policy is DeletePolicy.SET_NULL


def test_party_children_reference_the_public_party_key():
    party_children = [rule for rule in catalog.foreign_keys() if rule.parent_table == "listening_parties"]

    assert {rule.child_table for rule in party_children} == {
        "party_participants",
        "party_chat_messages",
        "party_playlist_queue",
        "party_voting",
        "party_reactions",
        "party_sync_events",
    }
    for rule in party_children:
        assert rule.parent_column == "party_id"
        assert rule.policy is DeletePolicy.CASCADE


def test_nullable_matches_delete_policy():
    # SET NULL needs a nullable column; every other reference is required
    metadata = catalog.get_metadata()
    for rule in catalog.foreign_keys():
        column = metadata.tables[rule.child_table].columns[rule.child_column]
        if rule.policy is DeletePolicy.SET_NULL:
            assert column.nullable, f"{rule.child_table}.{rule.child_column}"


def test_enum_columns_carry_their_literal_sets():
    enums = {(col.table, col.column): col.values for col in catalog.enum_columns()}

    assert enums[("users", "role")] == ("user", "admin")
    assert enums[("paypalSubscriptions", "status")] == ("active", "suspended", "cancelled", "expired")
    assert enums[("uploadedFiles", "fileType")] == ("audio", "image", "video")
    assert enums[("reviewModeration", "status")] == ("pending", "approved", "rejected", "resolved")
    assert enums[("leaderboards", "leaderboard_type")] == ("all_time", "monthly", "weekly")
    assert enums[("topReviewersLeaderboard", "period")] == ("weekly", "monthly", "alltime")
    assert enums[("party_user_votes", "vote")] == ("for", "against")
    assert enums[("party_sync_events", "event_type")] == ("play", "pause", "skip", "seek", "track_change")


def test_status_role_and_type_columns_are_enums():
    enum_keys = {(col.table, col.column) for col in catalog.enum_columns()}
    # Free-text exceptions: the upload MIME type and the leaderboard period key
    allowed_text = {("uploadSessions", "fileType"), ("leaderboards", "period")}

    for table in catalog.get_metadata().sorted_tables:
        for column in table.columns:
            if column.name in ("status", "role", "type", "fileType", "vote_type"):
                if (table.name, column.name) in allowed_text:
                    continue
                assert (table.name, column.name) in enum_keys, f"{table.name}.{column.name}"


def test_named_composite_uniques():
    rules = {rule.name: (rule.table, set(rule.columns)) for rule in catalog.unique_constraints() if rule.name}

    assert rules["userTrackUnique"] == ("trackReviews", {"userId", "trackId"})
    assert rules["userAlbumUnique"] == ("albumReviews", {"userId", "albumId"})
    assert rules["followerFollowingUnique"] == ("userFollows", {"followerId", "followingId"})
    assert rules["playlistFollowerUnique"] == ("playlistFollowers", {"playlistId", "userId"})
    assert rules["unique_invite"] == ("collaborationInvites", {"invitedUser", "musicUploadId"})
    assert rules["unique_collaborator"] == ("collaborators", {"userId", "musicUploadId"})
    assert rules["user_achievements_unique_idx"] == ("user_achievements", {"user_id", "achievement_id"})
    assert rules["party_user_votes_unique_idx"] == ("party_user_votes", {"vote_id", "user_id"})


def test_single_column_uniques():
    singles = {
        (rule.table, rule.columns[0]) for rule in catalog.unique_constraints() if len(rule.columns) == 1
    }

    for expected in (
        ("users", "openId"),
        ("subscriptionTiers", "name"),
        ("payments", "paypalTransactionId"),
        ("paypalSubscriptions", "userId"),
        ("trackRatings", "trackId"),
        ("artistResponses", "reviewId"),
        ("musicMetadata", "musicUploadId"),
        ("adminUsers", "email"),
        ("pushTokens", "token"),
        ("stripe_customers", "stripe_customer_id"),
        ("payment_events", "external_event_id"),
        ("listening_parties", "party_id"),
    ):
        assert expected in singles, expected


def test_unique_constraint_name_lookup():
    assert catalog.unique_constraint_name("trackReviews", ("trackId", "userId")) == "userTrackUnique"
    assert catalog.unique_constraint_name("trackReviews", ("userId",)) is None
