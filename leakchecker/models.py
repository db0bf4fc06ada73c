from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

NOT_FOUND_MESSAGE = "Good news! This email has not been found in any known data breaches."


class BreachRecord(BaseModel):
    """One breach as reported by HIBP. Field names follow the provider's JSON."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = Field(None, alias="Name")
    title: Optional[str] = Field(None, alias="Title")
    domain: Optional[str] = Field(None, alias="Domain")
    breach_date: Optional[str] = Field(None, alias="BreachDate")
    added_date: Optional[str] = Field(None, alias="AddedDate")
    modified_date: Optional[str] = Field(None, alias="ModifiedDate")
    pwn_count: Optional[int] = Field(0, alias="PwnCount")
    description: Optional[str] = Field(None, alias="Description")
    logo_path: Optional[str] = Field(None, alias="LogoPath")
    data_classes: Optional[List[str]] = Field(default_factory=list, alias="DataClasses")
    is_verified: Optional[bool] = Field(False, alias="IsVerified")
    is_fabricated: Optional[bool] = Field(False, alias="IsFabricated")
    is_sensitive: Optional[bool] = Field(False, alias="IsSensitive")
    is_retired: Optional[bool] = Field(False, alias="IsRetired")
    is_spam_list: Optional[bool] = Field(False, alias="IsSpamList")


class BreachQueryResult(BaseModel):
    breaches: List[BreachRecord]
    message: str


class ErrorBody(BaseModel):
    error: str
    details: Optional[str] = None


def breach_summary_message(count: int) -> str:
    if count == 0:
        return NOT_FOUND_MESSAGE
    return f"This email was found in {count} data breach{'' if count == 1 else 'es'}."
