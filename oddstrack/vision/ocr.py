# ocr.py - decode an uploaded screenshot and hand it to Tesseract
from __future__ import annotations
import logging
from typing import Protocol

import cv2
import numpy as np
import pytesseract

from oddstrack.core.errors import UnreadableImage

logger = logging.getLogger(__name__)

# multipliers are digits, a dot and the marker; everything else is noise
DEFAULT_TESS_CONFIG = "--psm 6 --oem 3 -c tessedit_char_whitelist=0123456789.x"


class TextRecognizer(Protocol):
    def recognize(self, image_bytes: bytes) -> str: ...


def decode_image(data: bytes) -> np.ndarray:
    file_bytes = np.frombuffer(data, np.uint8)
    img = cv2.imdecode(file_bytes, cv2.IMREAD_COLOR) if file_bytes.size else None
    if img is None:
        raise UnreadableImage()
    return img


def preprocess(img_bgr: np.ndarray) -> np.ndarray:
    gray = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)
    # game UIs draw light text on dark backgrounds; Tesseract wants the opposite
    if float(gray.mean()) < 127:
        gray = cv2.bitwise_not(gray)
    gray = cv2.resize(gray, None, fx=2.0, fy=2.0, interpolation=cv2.INTER_CUBIC)
    _, binary = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
    return binary


class TesseractRecognizer:
    def __init__(self, lang: str = "eng", config: str = DEFAULT_TESS_CONFIG, tesseract_cmd: str | None = None):
        self.lang = lang
        self.config = config
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes) -> str:
        img = decode_image(image_bytes)
        binary = preprocess(img)
        rgb = cv2.cvtColor(binary, cv2.COLOR_GRAY2RGB)
        text = pytesseract.image_to_string(rgb, lang=self.lang, config=self.config) or ""
        logger.debug("recognized %d characters from %dx%d image", len(text), img.shape[1], img.shape[0])
        return text
