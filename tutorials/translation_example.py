"""
Example usage of the TranslationClient with the Bing Translator API.
"""

import os
from dotenv import load_dotenv
from bingtranslator import TranslationClient

def main():
    # Load environment variables from .env file
    load_dotenv()
    
    client_id = os.getenv("BING_TRANSLATOR_CLIENT_ID")
    client_secret = os.getenv("BING_TRANSLATOR_CLIENT_SECRET")
    if not client_id or not client_secret:
        print("Warning: BING_TRANSLATOR_CLIENT_ID / BING_TRANSLATOR_CLIENT_SECRET not found in .env file")
        print("Please add them to your .env file: BING_TRANSLATOR_CLIENT_ID=your-client-id")
        return
    
    client = TranslationClient(client_id=client_id, client_secret=client_secret, timeout=10.0)
    
    # Single string
    print(client.translate("ja", "en", "こんにちは"))
    
    # Test texts to translate
    texts = [
        "Hello, how are you?",
        "The weather is nice today.",
        "I love programming in Python.",
        "This is a test of the translation client."
    ]
    
    print("Translating texts...")
    results = client.translate_array("en", "es", texts)
    if results is None:
        print("The service returned no result.")
        return
    
    # Print results
    print("\nTranslation Results:")
    print("-" * 50)
    for original, item in zip(texts, results):
        print(f"Original: {original}")
        print(f"Translated: {item.text}")
        print(f"Alignment: {item.alignment}")
        print("-" * 50)

if __name__ == "__main__":
    main()
