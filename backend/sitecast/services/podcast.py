"""One-shot podcast: generate a script and synthesize it."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sitecast.models import OrganizationDetails, PageBody, SavedAudioFile, ScriptSegment
from sitecast.services.content_generator import ContentGenerator
from sitecast.services.speech import VOICE_MODE_RANDOM, SpeechSynthesizer

logger = logging.getLogger(__name__)


@dataclass
class Podcast:
    script: str
    segments: list[ScriptSegment]
    saved_files: list[SavedAudioFile]

    @property
    def audio_files(self) -> int:
        return len(self.saved_files)


async def create_podcast(
    generator: ContentGenerator,
    synthesizer: SpeechSynthesizer,
    organization: OrganizationDetails,
    page_bodies: Sequence[PageBody],
) -> Podcast:
    """Generate a podcast script and synthesize each paragraph.

    Speakers alternate by paragraph and get the two voices in random order.
    Paragraphs that fail to synthesize are left out.

    Raises:
        ContentTooLargeError: If the page bodies cannot be fitted
        GenerationError: If script generation fails
    """
    generated = await generator.generate_podcast_script(organization, page_bodies)
    result = await synthesizer.synthesize(generated.segments, voice_mode=VOICE_MODE_RANDOM)

    logger.info(
        f"Generated {len(result.saved_files)} audio segments for {organization.organization_name}"
    )
    return Podcast(script=generated.script, segments=generated.segments, saved_files=result.saved_files)
