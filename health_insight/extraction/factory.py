from health_insight.config.settings import Settings
from health_insight.extraction.extractor import TextExtractor
from health_insight.extraction.image_base import BaseImageExtractor
from health_insight.extraction.tesseract_adapter import TesseractAdapter
from health_insight.extraction.vision_adapter import VisionModelAdapter
from health_insight.llm.gateway import LlmGateway
from health_insight.pdf.factory import PdfExtractorFactory


class ImageExtractorFactory:
    """Creates the image strategy selected by ``settings.image_engine``."""

    ENGINES = ("tesseract", "vision")

    @classmethod
    def create(cls, settings: Settings, vision_gateway: LlmGateway) -> BaseImageExtractor:
        engine = settings.image_engine.lower()
        if engine == "tesseract":
            return TesseractAdapter(lang=settings.tesseract_lang)
        if engine == "vision":
            return VisionModelAdapter(gateway=vision_gateway, model=settings.vision_model)
        raise ValueError(
            f"Unknown image engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )


def build_text_extractor(settings: Settings, vision_gateway: LlmGateway) -> TextExtractor:
    return TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        image_extractor=ImageExtractorFactory.create(settings, vision_gateway),
    )
