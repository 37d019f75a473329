import pytest

from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind
from health_insight.extraction.models import Artifact, MediaType


class TestMediaTypeParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("image/jpeg", MediaType.JPEG),
            ("image/jpg", MediaType.JPEG),
            ("IMAGE/PNG", MediaType.PNG),
            (" image/webp ", MediaType.WEBP),
            ("application/pdf", MediaType.PDF),
        ],
    )
    def test_accepts_allow_listed_types(self, raw: str, expected: MediaType) -> None:
        assert MediaType.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["image/gif", "text/plain", ""])
    def test_rejects_other_types(self, raw: str) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            MediaType.parse(raw)
        assert exc_info.value.kind is ExtractionErrorKind.UNSUPPORTED_MEDIA_TYPE

    def test_only_pdf_is_not_an_image(self) -> None:
        assert [m for m in MediaType if not m.is_image] == [MediaType.PDF]


class TestArtifact:
    def test_repr_hides_bytes(self) -> None:
        artifact = Artifact(data=b"\x89PNG" * 10, media_type=MediaType.PNG)
        assert repr(artifact) == "Artifact(media_type='image/png', size=40)"
