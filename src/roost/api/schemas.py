"""
Pydantic models for the Revolt API request and response bodies.

Only the shapes needed to document each operation live here; the
behaviour behind them is bound at runtime through named handlers.
"""

from pydantic import BaseModel, Field

# ============================================================================
# Core
# ============================================================================


class CaptchaFeature(BaseModel):
    enabled: bool = False
    key: str = ""


class Feature(BaseModel):
    enabled: bool = False
    url: str = ""


class VoiceFeature(BaseModel):
    enabled: bool = False
    url: str = ""
    ws: str = ""


class NodeFeatures(BaseModel):
    captcha: CaptchaFeature = Field(default_factory=CaptchaFeature)
    email: bool = False
    invite_only: bool = False
    autumn: Feature = Field(default_factory=Feature)
    january: Feature = Field(default_factory=Feature)
    voso: VoiceFeature = Field(default_factory=VoiceFeature)


class BuildInformation(BaseModel):
    commit_sha: str = ""
    commit_timestamp: str = ""
    semver: str = ""
    origin_url: str = ""
    timestamp: str = ""


class NodeInfo(BaseModel):
    revolt: str
    features: NodeFeatures = Field(default_factory=NodeFeatures)
    ws: str = ""
    app: str = ""
    vapid: str = ""
    build: BuildInformation = Field(default_factory=BuildInformation)


# ============================================================================
# Users
# ============================================================================


class User(BaseModel):
    id: str = Field(alias="_id")
    username: str
    discriminator: str = ""
    display_name: str | None = None
    relationship: str | None = None
    online: bool = False


class UserProfile(BaseModel):
    content: str | None = None
    background: str | None = None


class EditUser(BaseModel):
    display_name: str | None = Field(default=None, min_length=2, max_length=32)
    status: str | None = None
    profile: UserProfile | None = None


class ChangeUsername(BaseModel):
    username: str = Field(min_length=2, max_length=32)
    password: str = Field(min_length=8)


class MutualResponse(BaseModel):
    users: list[str] = Field(default_factory=list)
    servers: list[str] = Field(default_factory=list)


class FriendRequest(BaseModel):
    username: str = Field(min_length=2)


# ============================================================================
# Bots
# ============================================================================


class Bot(BaseModel):
    id: str = Field(alias="_id")
    owner: str
    token: str = ""
    public: bool = False
    interactions_url: str | None = None


class CreateBot(BaseModel):
    name: str = Field(min_length=2, max_length=32)


class EditBot(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=32)
    public: bool | None = None
    interactions_url: str | None = None


class InviteBotDestination(BaseModel):
    server: str | None = None
    group: str | None = None


# ============================================================================
# Channels and messaging
# ============================================================================


class Channel(BaseModel):
    id: str = Field(alias="_id")
    channel_type: str
    name: str | None = None
    description: str | None = None


class EditChannel(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=32)
    description: str | None = Field(default=None, max_length=1024)
    nsfw: bool | None = None


class CreateGroup(BaseModel):
    name: str = Field(min_length=1, max_length=32)
    description: str | None = None
    users: list[str] = Field(default_factory=list)


class Invite(BaseModel):
    code: str = Field(alias="_id")
    creator: str
    channel: str


class PermissionOverride(BaseModel):
    allow: int = 0
    deny: int = 0


class SetPermission(BaseModel):
    permissions: PermissionOverride


class SetDefaultPermission(BaseModel):
    permissions: int


class Message(BaseModel):
    id: str = Field(alias="_id")
    channel: str
    author: str
    content: str | None = None
    attachments: list[str] = Field(default_factory=list)


class SendMessage(BaseModel):
    content: str | None = Field(default=None, max_length=2000)
    attachments: list[str] = Field(default_factory=list)
    replies: list[str] = Field(default_factory=list)


class EditMessage(BaseModel):
    content: str = Field(max_length=2000)


class BulkDelete(BaseModel):
    ids: list[str] = Field(min_length=1, max_length=100)


class VoiceToken(BaseModel):
    token: str


# ============================================================================
# Servers
# ============================================================================


class Server(BaseModel):
    id: str = Field(alias="_id")
    owner: str
    name: str
    description: str | None = None
    channels: list[str] = Field(default_factory=list)


class CreateServer(BaseModel):
    name: str = Field(min_length=1, max_length=32)
    description: str | None = Field(default=None, max_length=1024)
    nsfw: bool = False


class EditServer(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=32)
    description: str | None = Field(default=None, max_length=1024)


class CreateChannel(BaseModel):
    type: str = "Text"
    name: str = Field(min_length=1, max_length=32)
    description: str | None = None


class Member(BaseModel):
    server: str
    user: str
    nickname: str | None = None
    roles: list[str] = Field(default_factory=list)


class EditMember(BaseModel):
    nickname: str | None = Field(default=None, min_length=1, max_length=32)
    roles: list[str] | None = None


class Role(BaseModel):
    name: str
    colour: str | None = None
    rank: int = 0


class CreateRole(BaseModel):
    name: str = Field(min_length=1, max_length=32)
    rank: int | None = None


class Ban(BaseModel):
    reason: str | None = Field(default=None, max_length=1024)


# ============================================================================
# Authentication
# ============================================================================


class AccountInfo(BaseModel):
    id: str = Field(alias="_id")
    email: str


class CreateAccount(BaseModel):
    email: str
    password: str = Field(min_length=8)
    invite: str | None = None
    captcha: str | None = None


class ChangePassword(BaseModel):
    password: str = Field(min_length=8)
    current_password: str


class ChangeEmail(BaseModel):
    email: str
    current_password: str


class PasswordReset(BaseModel):
    token: str
    password: str = Field(min_length=8)
    remove_sessions: bool = False


class SessionInfo(BaseModel):
    id: str = Field(alias="_id")
    name: str


class Login(BaseModel):
    email: str
    password: str
    friendly_name: str | None = None


class EditSession(BaseModel):
    friendly_name: str


class OnboardingStatus(BaseModel):
    onboarding: bool


class CompleteOnboarding(BaseModel):
    username: str = Field(min_length=2, max_length=32)


# ============================================================================
# Miscellaneous
# ============================================================================


class WebPushSubscription(BaseModel):
    endpoint: str
    p256dh: str
    auth: str


class FetchSettings(BaseModel):
    keys: list[str] = Field(default_factory=list)


class ChannelUnread(BaseModel):
    id: dict[str, str] = Field(alias="_id")
    last_id: str | None = None
    mentions: list[str] = Field(default_factory=list)
