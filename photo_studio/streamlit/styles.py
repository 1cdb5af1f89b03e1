"""Custom CSS for the Streamlit page."""

CUSTOM_CSS = """
<style>
    .main { padding: 1rem; }
    .hero-title { text-align: center; font-size: 1.6rem; font-weight: 700; color: #374151; margin-bottom: 0.5rem; }
    .hero-text { text-align: center; color: #6b7280; max-width: 42rem; margin: 0 auto 1.5rem auto; }
    .upload-hint { text-align: center; color: #6b7280; font-size: 0.8rem; }
    .busy-indicator { display: flex; flex-direction: column; align-items: center; justify-content: center; padding: 3rem 1rem; background-color: rgba(255,255,255,0.8); border-radius: 0.5rem; border: 1px solid #e5e7eb; }
    .busy-spinner { width: 4rem; height: 4rem; border: 4px solid #3b82f6; border-top-color: transparent; border-radius: 50%; animation: spin 1s linear infinite; }
    .busy-message { margin-top: 1rem; font-size: 1.1rem; font-weight: 600; color: #374151; }
    .studio-image { width: 100%; aspect-ratio: 1 / 1; object-fit: contain; background-color: #f3f4f6; border-radius: 0.5rem; border: 1px solid #e5e7eb; }
    .result-placeholder { text-align: center; color: #6b7280; padding: 4rem 1rem; background-color: #f3f4f6; border-radius: 0.5rem; border: 1px solid #e5e7eb; }
    .result-error { text-align: center; color: #b91c1c; padding: 2rem 1rem; background-color: #fef2f2; border-radius: 0.5rem; border: 1px solid #fecaca; }
    .studio-footer { text-align: center; color: #6b7280; font-size: 0.85rem; padding: 1rem; }
    @keyframes spin { to { transform: rotate(360deg); } }
</style>
"""
