"""
Centralized constants for DocSolver.
Fixed values that are not meant to be tuned per deployment.
"""

# ===========================================
# EXTRACTION
# ===========================================
PAGE_SEPARATOR = "\n\n--- page break ---\n\n"   # soft marker between pages
MIN_EXTRACTED_TEXT_LENGTH = 10                # chars, after trimming
STRUCTURAL_CONTENT_TYPES = (
    'application/pdf',
    'application/x-pdf',
)
STRUCTURAL_DECLARED_KINDS = ('pdf',)
OPTICAL_CONTENT_PREFIX = 'image/'

# ===========================================
# OCR
# ===========================================
OCR_DPI = 300                         # render resolution for PDF pages
OCR_DEFAULT_BACKEND = 'paddle'        # paddle | tesseract
OCR_PADDLE_LANG = 'en'
OCR_TESSERACT_LANG = 'eng'

# ===========================================
# SOLVER
# ===========================================
SOLVER_MAX_TOKENS = 4096
SOLVER_TEMPERATURE = 0.2
SOLVER_MAX_INPUT_CHARS = 60000        # longer extracted text is truncated

# ===========================================
# DELIVERY
# ===========================================
CHUNK_SIZE_LIMIT = 2800               # chars per chat message
DOCUMENT_CAPTION = "Here is the solved worksheet:"
ACKNOWLEDGMENT_TEXT = "Solved it! The full solution is in the attached PDF."

# ===========================================
# PAGE LAYOUT (points, 1/72 inch)
# ===========================================
PAGE_WIDTH = 595.27                   # A4
PAGE_HEIGHT = 841.89
PAGE_MARGIN = 50
FONT_NAME = 'Helvetica'
FONT_SIZE = 12
LINE_SPACING = 4                      # added to font size for the line step
TITLE_FONT_NAME = 'Helvetica-Bold'
TITLE_FONT_SIZE = 16
WRAP_COLUMNS = 90                     # upper bound; rows are also fitted to the printable width
TITLE_MAX_LINES = 3

# ===========================================
# ATTACHMENT FETCH
# ===========================================
FETCH_TIMEOUT_SECONDS = 30
MAX_ATTACHMENT_SIZE_MB = 25

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/docsolver.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
