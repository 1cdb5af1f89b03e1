"""Test doubles for the Gemini SDK and the generation client."""

import io

from google.genai import types

from photo_studio.exceptions import GenerationError


def make_response(*parts):
    """Build a generate_content response with one candidate holding parts."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes = b"generated-bytes", mime_type: str = "image/png"):
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def text_part(text: str):
    return types.Part(text=text)


class FakeModels:
    """Stands in for google.genai.Client().models."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeGenaiClient:
    def __init__(self, response=None, error=None):
        self.models = FakeModels(response=response, error=error)


class FakeGenerationClient:
    """Stands in for GenerationClient in state tests."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def generate(self, image, prompt):
        self.calls.append((image, prompt))
        if self.error is not None:
            raise self.error
        return self.result


def generation_error(message="Failed to generate photo: boom", advisory=None):
    return GenerationError(message, advisory=advisory)


class FakeUploadedFile(io.BytesIO):
    """Mimics Streamlit's UploadedFile (BytesIO with name and type)."""

    def __init__(self, data: bytes, name: str, type: str):
        super().__init__(data)
        self.name = name
        self.type = type


class BrokenUploadedFile:
    """Uploaded file whose read fails."""

    def __init__(self, name: str = "broken.png", type: str = "image/png"):
        self.name = name
        self.type = type

    def read(self):
        raise OSError("disk error")
