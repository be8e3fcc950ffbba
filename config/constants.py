"""
Centralized constants for the slide deck compiler.
All magic numbers used by layout and rendering live here.
"""

# ===========================================
# PAGE GEOMETRY (points)
# ===========================================
PAGE_SIZES = {
    "16-9": (841.89, 473.56),             # 29.7cm x 16.7cm
    "4-3": (793.70, 595.28),              # 28cm x 21cm
}
DEFAULT_ASPECT_RATIO = "16-9"

PAGE_MARGIN_X = 28.0                      # left/right body margin
HEADER_HEIGHT_RATIO = 1.8                 # header bar height / chrome size
FOOTER_HEIGHT_RATIO = 1.8                 # footer bar height / chrome size
CHROME_PADDING = 10.0                     # inner padding of header/footer bars
FOOTER_GAP = 8.0                          # gap between date and page label
TITLE_BAND_PADDING = 6.0

# Title page spacer weights: before title, title->identity, identity->date, after date
TITLE_PAGE_SPACER_WEIGHTS = (3, 2, 2, 3)

# ===========================================
# TYPOGRAPHY
# ===========================================
DEFAULT_FONT_SIZE = 20.0
DEFAULT_TEXT_FONT = "Helvetica"
DEFAULT_HEADING_FONT = "Helvetica-Bold"
DEFAULT_MONO_FONT = "Courier"
DEFAULT_MATH_FONT = "Times-Italic"
DEFAULT_COLOR = "#1f4e79"

HEADING_SIZE_RATIO = 1.2                  # heading-size: auto
MONO_SIZE_RATIO = 0.8                     # mono-size: auto
CHROME_SIZE_RATIO = 0.5                   # chrome-size: auto
LINE_SPACING = 1.25

AUTO = "auto"

# ===========================================
# PAGINATION
# ===========================================
PAGE_LABEL_SEPARATOR = "/"

# ===========================================
# FILE HANDLING
# ===========================================
SUPPORTED_EXTENSIONS = ['.md', '.markdown', '.txt']

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_CONSOLE_FORMAT = '%(levelname)s: %(message)s'
LOG_FILE = 'logs/slidedeck.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
