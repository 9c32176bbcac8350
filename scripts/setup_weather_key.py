"""
WeatherAPI key management utility.
Stores the API key in Key Vault so the function app can read it at startup.
"""
import os

from azure.identity import DefaultAzureCredential
from azure.keyvault.secrets import SecretClient
from dotenv import load_dotenv

from weatherclient.config import DEFAULT_KEY_SECRET

load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))


def store_api_key():
    """
    Copy WEATHER_API_KEY from the local environment into Key Vault.
    Run this locally once (and again after regenerating the key in the WeatherAPI dashboard).
    """
    api_key = os.environ['WEATHER_API_KEY']
    secret_name = os.environ.get('WEATHER_API_KEY_SECRET', DEFAULT_KEY_SECRET)

    key_vault_url = f"https://{os.environ['KEY_VAULT_NAME']}.vault.azure.net/"
    credential = DefaultAzureCredential()
    secret_client = SecretClient(vault_url=key_vault_url, credential=credential)

    print(f"Storing WeatherAPI key in Key Vault secret '{secret_name}'")
    secret_client.set_secret(secret_name, api_key)
    verify = secret_client.get_secret(secret_name).value
    if verify == api_key:
        print("Verified API key persisted in Key Vault.")
    else:
        print(f"ERROR: API key mismatch after update for secret '{secret_name}'!")

if __name__ == "__main__":
    store_api_key()
