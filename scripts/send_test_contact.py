#!/usr/bin/env python3
"""
Manual smoke test for the contact endpoint
Run this after starting the server with: uvicorn digilima.main:app --reload

Every successful run sends two real emails (notification + auto-reply)
when RESEND_API_KEY is configured on the server.
"""

import argparse

import requests


def send_test_contact(base_url: str, email: str):
    """Post a sample submission and report the outcome"""

    url = f"{base_url.rstrip('/')}/api/contact"

    test_data = {
        "name": "John Doe",
        "email": email,
        "phone": "+357 99 000 000",
        "company": "Acme Corporation",
        "budget": "€5000-10000",
        "projectType": "Business Website",
        "message": "Hello! I'm interested in a new website for my company. Please contact me at your earliest convenience.",
        "consent": True,
        "website": "",
    }

    try:
        response = requests.post(url, json=test_data, timeout=30)

        if response.status_code == 200:
            print("✅ Contact API test successful!")
            print(f"Response: {response.json()}")
        else:
            print(f"❌ API test failed with status code: {response.status_code}")
            print(f"Response: {response.text}")

    except requests.exceptions.ConnectionError:
        print("❌ Could not connect to the API server.")
        print("Make sure the server is running with: uvicorn digilima.main:app --reload")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send a sample contact form submission")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--email", default="john.doe@example.com", help="Address that receives the auto-reply")
    args = parser.parse_args()

    print("🧪 Testing Contact API...")
    print("=" * 50)
    send_test_contact(args.base_url, args.email)
