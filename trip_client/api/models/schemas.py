from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ---------- Itinerary draft ----------

Currency = Literal["USD", "EUR", "GBP", "INR", "JPY", "AUD", "CAD"]

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "C$",
}

DEFAULT_ACTIVITY_TIME = "09:00"


class ActivityItem(BaseModel):
    time: str = DEFAULT_ACTIVITY_TIME
    activity: str = ""
    location: str = ""
    notes: str = ""

    def is_blank(self) -> bool:
        return not self.activity and not self.location


class Budget(BaseModel):
    amount: Union[str, float, int] = ""
    currency: Currency = "USD"


# ---------- Guide (inbound, read-only) ----------

RecommendationCategory = Literal["Lodging", "Dining", "Activity"]


class GuideLocation(BaseModel):
    city: str = ""
    country: str = ""


class RecommendationItem(BaseModel):
    name: str
    description: str = ""
    cuisine: Optional[str] = None
    lodgingType: Optional[str] = None
    activityType: Optional[str] = None


class GuideRecommendations(BaseModel):
    lodging: List[RecommendationItem] = Field(default_factory=list)
    dining: List[RecommendationItem] = Field(default_factory=list)
    activities: List[RecommendationItem] = Field(default_factory=list)


class Guide(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    location: GuideLocation = Field(default_factory=GuideLocation)
    recommendations: GuideRecommendations = Field(default_factory=GuideRecommendations)


class RecommendationRef(BaseModel):
    name: str
    description: str = ""
    category: RecommendationCategory


# ---------- Draft views ----------


class DayPlanView(BaseModel):
    day: int
    items: List[ActivityItem]


class DraftView(BaseModel):
    id: str
    itineraryId: Optional[str] = None
    title: str
    destination: str
    durationDays: int
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    budget: Budget
    currencySymbol: str
    isPublic: bool
    selectedGuideId: Optional[str] = None
    days: List[DayPlanView]
    submitting: bool = False
    createdAt: datetime
    updatedAt: datetime


class ValidationResult(BaseModel):
    valid: bool
    message: Optional[str] = None


# ---------- Draft requests ----------


class CreateDraftRequest(BaseModel):
    itineraryId: Optional[str] = None


class UpdateDetailsRequest(BaseModel):
    title: Optional[str] = None
    isPublic: Optional[bool] = None
    budget: Optional[Budget] = None


class SelectDestinationRequest(BaseModel):
    guideId: Optional[str] = None


class UpdateDatesRequest(BaseModel):
    startDate: Optional[date] = None
    endDate: Optional[date] = None


class SetDurationRequest(BaseModel):
    durationDays: int


class UpdateActivityRequest(BaseModel):
    time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    activity: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class ImportRecommendationRequest(BaseModel):
    day: int = Field(ge=1)
    recommendation: RecommendationRef


class SubmitResponse(BaseModel):
    itineraryId: Optional[str] = None
    itinerary: Dict[str, Any]


# ---------- Groups ----------


class Reply(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    content: str
    user: Optional[Union[Dict[str, Any], str]] = None
    createdAt: Optional[datetime] = None


class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    content: str
    user: Optional[Union[Dict[str, Any], str]] = None
    createdAt: Optional[datetime] = None
    replies: List[Reply] = Field(default_factory=list)


class Group(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    name: str
    description: str = ""
    private: bool = False
    posts: List[Post] = Field(default_factory=list)


class FeedPost(BaseModel):
    id: str
    content: str
    author: Optional[str] = None
    createdAt: Optional[datetime] = None
    replyCount: int
    replies: List[Reply]


class GroupFeed(BaseModel):
    groupId: str
    name: str
    private: bool
    posts: List[FeedPost]


class PostRequest(BaseModel):
    content: str


class JoinGroupRequest(BaseModel):
    inviteCode: Optional[str] = None


class InviteRequest(BaseModel):
    email: str


# ---------- Reviews ----------

ReviewTarget = Literal["Guide", "Itinerary"]


class ReviewRequest(BaseModel):
    targetModel: ReviewTarget
    targetId: str
    rating: Optional[int] = None
    comment: str = ""
    tags: Union[str, List[str]] = ""


class ReviewUpdateRequest(BaseModel):
    rating: Optional[int] = None
    comment: str = ""
    tags: Union[str, List[str]] = ""


class ReviewSummary(BaseModel):
    count: int
    averageRating: Optional[float] = None
    reviews: List[Dict[str, Any]]


# ---------- Admin ----------

UserRole = Literal["admin", "user"]


class RoleUpdateRequest(BaseModel):
    role: UserRole


class RoleToggleRequest(BaseModel):
    currentRole: UserRole
