"""
API models for reel creation.

Fields are pass-through data for the orchestrator: only their JSON types are
checked here, without coercion. The queued command carries exactly the
fields the caller sent, unknown ones included; omitted fields stay omitted.
"""

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr
from typing import List, Optional, Union

# JSON numbers keep their int/float form; bools and numeric strings are rejected
Number = Union[StrictInt, StrictFloat]


class _PassThrough(BaseModel):
    class Config:
        extra = "allow"
        populate_by_name = True


class IdealClientProfile(_PassThrough):
    industry: StrictStr = Field("", description="Industry of the ideal client")
    audience_pain_points: List[StrictStr] = Field(default_factory=list, alias="audiencePainPoints")
    desired_outcome: Optional[StrictStr] = Field(None, alias="desiredOutcome")


class FluxModelConfig(_PassThrough):
    lora_url: StrictStr = Field("", alias="loraUrl", description="URL of the LoRA weights")
    cfg_scale: Optional[Number] = Field(None, alias="cfgScale")
    steps: Optional[StrictInt] = None


class FluxPromptRequest(_PassThrough):
    prompt: StrictStr = ""
    negative_prompt: Optional[StrictStr] = Field(None, alias="negativePrompt")
    aspect_ratio: Optional[StrictStr] = Field(None, alias="aspectRatio")
    batch_size: Optional[StrictInt] = Field(None, alias="batchSize")


class KlingPreferences(_PassThrough):
    style_preset: Optional[StrictStr] = Field(None, alias="stylePreset")
    negative_prompt: Optional[StrictStr] = Field(None, alias="negativePrompt")
    guidance_scale: Optional[Number] = Field(None, alias="guidanceScale")
    duration_seconds: Optional[Number] = Field(None, alias="durationSeconds")


class CallToAction(_PassThrough):
    type: StrictStr = ""
    keyword: Optional[StrictStr] = None


class CaptionPreferences(_PassThrough):
    hook_style: Optional[StrictStr] = Field(None, alias="hookStyle")
    body_style: Optional[StrictStr] = Field(None, alias="bodyStyle")
    call_to_action: Optional[CallToAction] = Field(None, alias="callToAction")


# Request Models
class CreateReelRequest(_PassThrough):
    """Request to generate a reel."""
    project_id: StrictStr = Field("", alias="projectId", description="Project the reel belongs to")
    icp: IdealClientProfile = Field(default_factory=IdealClientProfile, description="Ideal client profile")
    idea: StrictStr = Field("", description="Free-text reel idea")
    flux_model: FluxModelConfig = Field(default_factory=FluxModelConfig, alias="fluxModel")
    flux_prompt: FluxPromptRequest = Field(default_factory=FluxPromptRequest, alias="fluxPrompt")
    kling_preferences: Optional[KlingPreferences] = Field(None, alias="klingPreferences")
    caption_preferences: Optional[CaptionPreferences] = Field(None, alias="captionPreferences")

    class Config:
        extra = "allow"
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "projectId": "proj_789",
                "icp": {
                    "industry": "Digital marketing",
                    "audiencePainPoints": ["Creating consistent content takes too much time"],
                    "desiredOutcome": "Scale content production with AI twin reels"
                },
                "idea": "Show how AI twins let you create reels in minutes instead of hours",
                "fluxModel": {
                    "loraUrl": "https://v3.fal.media/files/elephant/pytorch_lora_weights.safetensors",
                    "cfgScale": 8,
                    "steps": 30
                },
                "fluxPrompt": {
                    "prompt": "Professional digital marketer in modern home office setup",
                    "negativePrompt": "blurry, low-resolution",
                    "aspectRatio": "9:16",
                    "batchSize": 4
                }
            }
        }


# Response Models
class CreateReelResponse(BaseModel):
    """Returned once a reel request has been queued."""
    run_id: str = Field(..., alias="runId", description="Identifier of the accepted run")

    class Config:
        populate_by_name = True
