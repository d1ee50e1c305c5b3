from google.genai.client import Client


def get_raw_google_client(api_key: str) -> Client:
    return Client(api_key=api_key)
