from ..models.color import Color


class PixelWriterService:
    """
    Computes the packed ARGB value a matched pixel is replaced with.
    """

    @staticmethod
    def compute_replacement(
        current_argb: int,
        dest_color: Color,
        preserve_alpha: bool,
        image_has_alpha: bool,
    ) -> int:
        """
        Args:
            current_argb: the pixel's value before replacement.
            dest_color: the color to write.
            preserve_alpha: keep the pixel's own alpha instead of `dest_color.alpha`.
            image_has_alpha: whether the image carries alpha at all; if not,
                a preserved alpha falls back to 255.

        Returns:
            (int): the new 0xAARRGGBB value.
        """
        if not preserve_alpha:
            return dest_color.argb

        alpha = (current_argb >> 24) & 0xFF if image_has_alpha else 0xFF
        return dest_color.with_alpha(alpha).argb
