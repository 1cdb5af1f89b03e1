"""Fixed prompts and UI copy."""

DEFAULT_PROMPT = (
    "Jadikan produk ini terlihat seperti di atas meja marmer putih "
    "dengan pencahayaan yang lembut dan alami."
)

PROMPT_SCAFFOLD = (
    "Given the user-uploaded product image, transform it into a professional, "
    "high-quality product photograph suitable for e-commerce.\n"
    "- The background should be clean, minimalist, and non-distracting. "
    "Use a soft, neutral-colored surface or a subtle gradient.\n"
    "- Enhance the lighting to be bright and even, highlighting the product's "
    "features without harsh shadows.\n"
    "- Improve color balance and saturation to make the product look appealing "
    "and true-to-life.\n"
    "- Ensure the final image is crisp and high-resolution.\n"
    "- Do not add any text or watermarks.\n"
    "- Focus only on improving the existing product image on a better background.\n"
    '- User\'s specific request: "{user_prompt}"'
)

DEFAULT_MODEL = "gemini-2.5-flash-image-preview"

GENERATED_IMAGE_NAME = "generated_product_photo.png"
GENERATED_MEDIA_TYPE = "image/png"
DOWNLOAD_PREFIX = "professional_"
DOWNLOAD_FALLBACK_NAME = "photo"

# Messages
NO_IMAGE_MESSAGE = "AI did not return an image. Please try again with a different image or prompt."
GENERATION_FAILED_PREFIX = "Failed to generate photo"
UNKNOWN_GENERATION_ERROR = "An unknown error occurred while generating the photo."
UNKNOWN_ERROR_MESSAGE = "Terjadi kesalahan yang tidak diketahui."
NO_IMAGE_FALLBACK_MESSAGE = "Gagal menghasilkan gambar, AI tidak mengembalikan gambar."
INVALID_UPLOAD_MESSAGE = "Please upload an image file."
FILE_READ_MESSAGE = "Could not process file. Please try another image."

# Upload picker
ACCEPTED_EXTENSIONS = ["png", "jpg", "jpeg", "webp"]

# Busy indicator
BUSY_MESSAGES = [
    "Menerapkan pencahayaan studio...",
    "Menyesuaikan latar belakang...",
    "Mempertajam detail produk...",
    "Menyempurnakan warna...",
    "AI sedang berpikir keras...",
    "Hampir selesai...",
]
BUSY_INTERVAL_SEC = 2.5

# Branding
LOGO_URL = "https://seeklogo.com/images/S/sukabumi-kabupaten-logo-8404222067-seeklogo.com.png"
APP_TITLE = "Foto Produk Profesional AI"
AGENCY_NAME = "Dinas Koperasi dan UMKM Kabupaten Sukabumi"
