# renderer/image_io.py
import os
from PIL import Image
from libray.renderer.canvas import Canvas

PPM_MAX_LINE = 70

def save_image(canvas: Canvas, path: str) -> str:
    """
    Write the canvas to disk with Pillow.

    A .ppm suffix produces a binary (P6) portable pixmap; any other suffix
    Pillow knows (png, bmp, ...) works as well.

    Raises:
        FileNotFoundError: If the target directory doesn't exist
    """
    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory not found: {directory}")

    image = Image.fromarray(canvas.to_uint8())
    image.save(path)
    return path

def to_ppm(canvas: Canvas) -> str:
    """
    Encode the canvas as ASCII (P3) PPM text. Pixel rows are wrapped so that
    no line exceeds 70 characters.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    data = canvas.to_uint8()
    for row in data:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_MAX_LINE:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)
    return "\n".join(lines) + "\n"
