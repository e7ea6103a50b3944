from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import (
    ArtworkStatus,
    MusicUploadStatus,
    UploadedFileType,
    UploadSessionStatus,
)
from ..types import enum_type


# ============================================================================
# CATALOG: ALBUMS, TRACKS, PLAYLISTS
# ============================================================================


class Album(Base):
    """Album released by an artist account."""

    __tablename__ = "albums"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    description = Column(Text, nullable=True)
    cover_art_url = Column("coverArtUrl", String(512), nullable=True)
    release_date = Column("releaseDate", DateTime(timezone=True), nullable=True)
    genre = Column(String(64), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    artist = relationship("User")
    tracks = relationship("Track", back_populates="album", passive_deletes=True)


class Track(Base):
    """Catalog track. Audio lives in object storage; only its URL and key are kept."""

    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Tracks outlive their album
    album_id = Column(
        "albumId", Integer, ForeignKey("albums.id", ondelete="SET NULL"), nullable=True, index=True
    )
    duration = Column(Integer, nullable=False)  # seconds
    genre = Column(String(64), nullable=True)
    isrc = Column(String(12), nullable=True)  # International Standard Recording Code
    audio_url = Column("audioUrl", String(512), nullable=False)
    audio_key = Column("audioKey", String(512), nullable=False, server_default="default-key")
    cover_art_url = Column("coverArtUrl", String(512), nullable=True)
    lyrics = Column(Text, nullable=True)
    is_published = Column("isPublished", Boolean, nullable=False, server_default=false())
    play_count = Column("playCount", Integer, nullable=False, server_default="0")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    artist = relationship("User")
    album = relationship("Album", back_populates="tracks")


class Playlist(Base):
    """Simple user playlist."""

    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    description = Column(Text, nullable=True)
    is_public = Column("isPublic", Boolean, nullable=False, server_default=false())
    cover_art_url = Column("coverArtUrl", String(512), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    owner = relationship("User")
    entries = relationship(
        "PlaylistTrack",
        back_populates="playlist",
        order_by="PlaylistTrack.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class PlaylistTrack(Base):
    """Ordered playlist membership (many-to-many between playlists and tracks)."""

    __tablename__ = "playlistTracks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    playlist_id = Column(
        "playlistId", Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    added_at = Column("addedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    playlist = relationship("Playlist", back_populates="entries")
    track = relationship("Track")


# ============================================================================
# USER-GENERATED CONTENT
# ============================================================================


class UploadedFile(Base):
    """Audio, image or video object uploaded to storage."""

    __tablename__ = "uploadedFiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    file_name = Column("fileName", String(255), nullable=False)
    file_key = Column("fileKey", String(512), unique=True, nullable=False)
    file_url = Column("fileUrl", String(512), nullable=False)
    file_type = Column("fileType", enum_type(UploadedFileType, "ck_uploadedFiles_fileType"), nullable=False)
    mime_type = Column("mimeType", String(100), nullable=False)
    file_size = Column("fileSize", Integer, nullable=False)  # bytes
    # "metadata" is reserved on declarative classes
    file_metadata = Column("metadata", Text, nullable=True)
    uploaded_at = Column("uploadedAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class ArtistProfile(Base):
    """Public artist page. At most one per user."""

    __tablename__ = "artistProfiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    artist_name = Column("artistName", String(255), nullable=False)
    bio = Column(Text, nullable=True)
    profile_image = Column("profileImage", String(512), nullable=True)
    banner_image = Column("bannerImage", String(512), nullable=True)
    genre = Column(String(64), nullable=True)
    location = Column(String(255), nullable=True)
    website = Column(String(512), nullable=True)
    social_links = Column("socialLinks", Text, nullable=True)  # JSON, opaque
    followers = Column(Integer, nullable=False, server_default="0")
    total_plays = Column("totalPlays", Integer, nullable=False, server_default="0")
    verified_badge = Column("verifiedBadge", Boolean, nullable=False, server_default=false())
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    user = relationship("User")
    uploads = relationship(
        "ArtistUpload", back_populates="artist", cascade="all, delete-orphan", passive_deletes=True
    )


class ArtistUpload(Base):
    """Track uploaded by an artist profile."""

    __tablename__ = "artistUploads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId",
        Integer,
        ForeignKey("artistProfiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    genre = Column(String(64), nullable=False)
    audio_url = Column("audioUrl", String(512), nullable=False)
    audio_key = Column("audioKey", String(512), nullable=False)
    cover_art_url = Column("coverArtUrl", String(512), nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    bpm = Column(Integer, nullable=True)
    musical_key = Column("key", String(10), nullable=True)
    release_date = Column("releaseDate", DateTime(timezone=True), nullable=True)
    is_published = Column("isPublished", Boolean, nullable=False, server_default=false())
    is_explicit = Column("isExplicit", Boolean, nullable=False, server_default=false())
    downloadable = Column(Boolean, nullable=False, server_default=false())
    download_price = Column("downloadPrice", Integer, nullable=True)  # cents

    # Counters
    plays = Column(Integer, nullable=False, server_default="0")
    downloads = Column(Integer, nullable=False, server_default="0")
    likes = Column(Integer, nullable=False, server_default="0")
    comments = Column(Integer, nullable=False, server_default="0")

    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    artist = relationship("ArtistProfile", back_populates="uploads")


class UserPlaylist(Base):
    """Extended user playlist with social counters."""

    __tablename__ = "userPlaylists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    cover_image_url = Column("coverImageUrl", String(512), nullable=True)
    is_public = Column("isPublic", Boolean, nullable=False, server_default=false())
    plays = Column(Integer, nullable=False, server_default="0")
    shares = Column(Integer, nullable=False, server_default="0")
    followers = Column(Integer, nullable=False, server_default="0")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class PlaylistFollower(Base):
    __tablename__ = "playlistFollowers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    playlist_id = Column(
        "playlistId",
        Integer,
        ForeignKey("userPlaylists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    followed_at = Column("followedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (UniqueConstraint("playlistId", "userId", name="playlistFollowerUnique"),)


class PlaylistShare(Base):
    __tablename__ = "playlistShares"

    id = Column(Integer, primary_key=True, autoincrement=True)
    playlist_id = Column(
        "playlistId",
        Integer,
        ForeignKey("userPlaylists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    shared_by = Column(
        "sharedBy", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    platform = Column(String(64), nullable=True)  # twitter, facebook, whatsapp, copy
    shared_at = Column("sharedAt", DateTime(timezone=True), nullable=False, server_default=func.now())


# ============================================================================
# MUSIC UPLOADS
# ============================================================================


class MusicUpload(Base):
    """Uploaded music file moving through draft -> published."""

    __tablename__ = "musicUploads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uploaded_by = Column(
        "uploadedBy", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=False)
    album = Column(String(255), nullable=True)
    genre = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    file_key = Column("fileKey", String(500), nullable=False)
    file_url = Column("fileUrl", String(500), nullable=False)
    mime_type = Column("mimeType", String(100), nullable=False)  # e.g. "audio/mpeg"
    file_size = Column("fileSize", Integer, nullable=True)  # bytes
    status = Column(
        enum_type(MusicUploadStatus, "ck_musicUploads_status"),
        nullable=False,
        server_default=MusicUploadStatus.DRAFT.value,
    )
    release_date = Column("releaseDate", DateTime(timezone=True), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    uploader = relationship("User")
    track_metadata = relationship(
        "MusicMetadata",
        back_populates="music_upload",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class AlbumArtwork(Base):
    """Cover art image uploaded for an album name."""

    __tablename__ = "albumArtwork"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uploaded_by = Column(
        "uploadedBy", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    album_name = Column("albumName", String(255), nullable=False)
    artwork_key = Column("artworkKey", String(500), nullable=False)
    artwork_url = Column("artworkUrl", String(500), nullable=False)
    mime_type = Column("mimeType", String(100), nullable=False)
    file_size = Column("fileSize", Integer, nullable=True)
    width = Column(Integer, nullable=True)  # pixels
    height = Column(Integer, nullable=True)  # pixels
    status = Column(
        enum_type(ArtworkStatus, "ck_albumArtwork_status"),
        nullable=False,
        server_default=ArtworkStatus.DRAFT.value,
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class UploadSession(Base):
    """In-flight chunked upload."""

    __tablename__ = "uploadSessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uploaded_by = Column(
        "uploadedBy", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    session_id = Column("sessionId", String(255), unique=True, nullable=False)
    file_name = Column("fileName", String(255), nullable=False)
    file_type = Column("fileType", String(100), nullable=False)  # MIME type, not an enum
    total_size = Column("totalSize", Integer, nullable=False)
    uploaded_size = Column("uploadedSize", Integer, nullable=False, server_default="0")
    status = Column(
        enum_type(UploadSessionStatus, "ck_uploadSessions_status"),
        nullable=False,
        server_default=UploadSessionStatus.PENDING.value,
    )
    error_message = Column("errorMessage", Text, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    expires_at = Column("expiresAt", DateTime(timezone=True), nullable=True)


class MusicMetadata(Base):
    """Detailed credits and identifiers for an upload. At most one per upload."""

    __tablename__ = "musicMetadata"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    composer = Column(String(255), nullable=True)
    lyricist = Column(String(255), nullable=True)
    producer = Column(String(255), nullable=True)
    record_label = Column("recordLabel", String(255), nullable=True)
    isrc = Column(String(20), nullable=True)
    iswc = Column(String(20), nullable=True)  # International Standard Musical Work Code
    bpm = Column(Integer, nullable=True)
    musical_key = Column("key", String(10), nullable=True)  # e.g. "C Major"
    language = Column(String(10), nullable=True)  # ISO 639-1
    lyrics = Column(Text, nullable=True)
    tags = Column(String(500), nullable=True)  # comma-separated
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    music_upload = relationship("MusicUpload", back_populates="track_metadata")
