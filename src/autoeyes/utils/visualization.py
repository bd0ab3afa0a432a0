import cv2
import numpy as np


def get_roi_from_screenshot(
    screenshot: np.ndarray, region: tuple[int, int, int, int]
) -> np.ndarray:
    """Extract a region of interest (ROI) from a screenshot.

    Args:
        screenshot (np.ndarray): The full screenshot image
        region (tuple): Region coordinates (left, top, width, height) relative to the screenshot

    Returns:
        np.ndarray: View of the region of interest (not a copy)
    """
    left, top, width, height = region
    return screenshot[top : top + height, left : left + width]


def add_region_to_image(
    image: np.ndarray,
    region: tuple[int, int, int, int],
    name: str = None,
    color: tuple[int, int, int] = (0, 255, 0),
    thickness: int = 2,
    font_scale: float = 0.5,
) -> np.ndarray:
    """Draw a single region border, optionally labelled, on a copy of the image.

    Args:
        image (np.ndarray): The image to draw on
        region (tuple): Region coordinates (left, top, width, height)
        name (str, optional): Name to label the region
        color (tuple): BGR color for the region (default: green)
        thickness (int): Border thickness in pixels
        font_scale (float): Label font scale

    Returns:
        np.ndarray: Image with region visualization
    """
    vis_image = image.copy()
    left, top, width, height = region

    cv2.rectangle(
        vis_image, (left, top), (left + width - 1, top + height - 1), color, thickness
    )

    if name:
        add_caption_to_image(vis_image, (left, top), name, color, font_scale)

    return vis_image


def add_caption_to_image(
    image: np.ndarray,
    anchor: tuple[int, int],
    text: str,
    color: tuple[int, int, int] = (0, 255, 0),
    font_scale: float = 0.5,
) -> np.ndarray:
    """Draw text just above the anchor point, in place.

    The text is moved below the anchor when there is no room above it.
    """
    left, top = anchor
    (_, text_height), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, font_scale, 1)
    baseline_y = top - 5 if top - 5 - text_height >= 0 else top + text_height + 5
    cv2.putText(
        image,
        text,
        (left, baseline_y),
        cv2.FONT_HERSHEY_SIMPLEX,
        font_scale,
        color,
        1,
        cv2.LINE_AA,
    )
    return image


def add_fill_to_image(
    image: np.ndarray,
    region: tuple[int, int, int, int],
    color: tuple[int, int, int] = (0, 255, 0),
    alpha: float = 0.5,
) -> np.ndarray:
    """Blend a translucent color over a region, in place.

    Args:
        image (np.ndarray): The image to draw on
        region (tuple): Region coordinates (left, top, width, height)
        color (tuple): BGR fill color
        alpha (float): Fill opacity in [0, 1]

    Returns:
        np.ndarray: The same image, for chaining
    """
    alpha = min(max(alpha, 0.0), 1.0)
    roi = get_roi_from_screenshot(image, region)
    overlay = np.empty_like(roi)
    overlay[:] = color
    roi[:] = cv2.addWeighted(overlay, alpha, roi, 1.0 - alpha, 0)
    return image


def draw_matches(
    image: np.ndarray,
    regions: list[tuple[int, int, int, int]],
    labels: list[str] | None = None,
    color: tuple[int, int, int] = (0, 0, 255),
) -> np.ndarray:
    """Draw several labelled regions on a copy of the image."""
    vis_image = image.copy()
    labels = labels or [None] * len(regions)
    for region, label in zip(regions, labels):
        vis_image = add_region_to_image(vis_image, region, label, color)
    return vis_image
