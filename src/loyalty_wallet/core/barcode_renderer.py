"""
Barcode image generation for loyalty cards.
"""

import io
from typing import Optional

import qrcode
from barcode import Code128
from barcode.errors import BarcodeError
from barcode.writer import ImageWriter
from qrcode.exceptions import DataOverflowError

from ..utils.config import AppConfig
from ..utils.validators import CardValidator
from .card import CodeType


class BarcodeRenderer:
    """
    Renders a card's code to PNG bytes.

    ``render`` reports unsupported input by returning None instead of
    raising, so callers can show a fallback message.
    """

    def __init__(self, writer_options: Optional[dict] = None,
                 qr_box_size: int = AppConfig.QR_BOX_SIZE,
                 qr_border: int = AppConfig.QR_BORDER) -> None:
        self.writer_options = dict(AppConfig.BARCODE_WRITER_OPTIONS)
        if writer_options:
            self.writer_options.update(writer_options)
        self.qr_box_size = qr_box_size
        self.qr_border = qr_border

    def render(self, text: str, code_type: CodeType = CodeType.BARCODE) -> Optional[bytes]:
        """
        Render ``text`` in the given symbology.

        Args:
            text: Payload to encode
            code_type: Linear Code 128 barcode or QR code

        Returns:
            PNG image bytes, or None if the text cannot be encoded
        """
        if not text:
            return None

        if code_type == CodeType.QRCODE:
            return self._render_qrcode(text)
        return self._render_code128(text)

    def _render_code128(self, text: str) -> Optional[bytes]:
        # Code 128 only covers the ASCII range
        if not CardValidator.is_ascii(text):
            return None

        buffer = io.BytesIO()
        try:
            Code128(text, writer=ImageWriter()).write(buffer, self.writer_options)
        except (BarcodeError, KeyError, ValueError, OSError):
            return None
        return buffer.getvalue()

    def _render_qrcode(self, text: str) -> Optional[bytes]:
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self.qr_box_size,
            border=self.qr_border,
        )
        buffer = io.BytesIO()
        try:
            qr.add_data(text)
            qr.make(fit=True)
            img = qr.make_image(fill_color="black", back_color="white")
            img.save(buffer, format="PNG")
        except (DataOverflowError, ValueError, OSError):
            return None
        return buffer.getvalue()
