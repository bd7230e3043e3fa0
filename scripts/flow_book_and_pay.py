#!/usr/bin/env python3
"""
Complete booking wizard flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_book_and_pay.py --check-in 2026-04-01 --check-out 2026-04-04
    python scripts/flow_book_and_pay.py --experience monastery-treks --check-in 2026-05-01 --check-out 2026-05-05 --participants 3

Flow:
    1. List experiences
    2. Quote the booking
    3. Create booking
    4. Create payment intent
    5. Confirm payment
    6. Look up booking by reference number
"""

import argparse
import json
import sys

import httpx

BASE_URL = "http://localhost:5000"


def api_request(method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make API request."""
    url = f"{BASE_URL}{endpoint}"

    if method == "GET":
        response = httpx.get(url, timeout=10.0, follow_redirects=True)
    elif method == "POST":
        response = httpx.post(url, json=data or {}, timeout=10.0, follow_redirects=True)
    else:
        raise ValueError(f"Unknown method: {method}")

    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict, fields: list[str] | None = None):
    """Print result, optionally filtering fields."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    if fields and isinstance(result["data"], dict):
        filtered = {k: result["data"].get(k) for k in fields if k in result["data"]}
        print(json.dumps(filtered, indent=2))
    else:
        print(json.dumps(result["data"], indent=2))
    return True


def main():
    global BASE_URL

    parser = argparse.ArgumentParser(description="Complete booking and payment flow")
    parser.add_argument("--base-url", default=BASE_URL, help="API server URL")
    parser.add_argument("--experience", default="meditation-retreats", help="Experience id")
    parser.add_argument("--check-in", required=True, help="Check-in date (YYYY-MM-DD)")
    parser.add_argument("--check-out", required=True, help="Check-out date (YYYY-MM-DD)")
    parser.add_argument("--participants", type=int, default=2, help="Number of participants")
    parser.add_argument("--skip-payment", action="store_true", help="Stop after creating the booking")
    args = parser.parse_args()
    BASE_URL = args.base_url.rstrip("/")

    # Step 1: List experiences
    print_step(1, "List experiences")
    experiences_result = api_request("GET", "/api/experiences")
    if experiences_result["status"] >= 400:
        print_result(experiences_result)
        sys.exit(1)
    for experience in experiences_result["data"]:
        print(f"  {experience['id']:<22} {experience['price']:>8}  {experience['duration']}")

    # Step 2: Quote
    print_step(2, "Quote booking")
    quote_result = api_request("POST", "/api/bookings/quote", {
        "experienceId": args.experience,
        "participants": args.participants,
        "checkinDate": args.check_in,
        "checkoutDate": args.check_out,
    })
    if not print_result(quote_result):
        sys.exit(1)
    total_amount = quote_result["data"]["totalAmount"]

    # Step 3: Create booking
    print_step(3, "Create booking")
    booking_result = api_request("POST", "/api/bookings", {
        "experienceId": args.experience,
        "checkinDate": args.check_in,
        "checkoutDate": args.check_out,
        "participants": args.participants,
        "firstName": "Tenzin",
        "lastName": "Norbu",
        "email": "tenzin@example.com",
        "phone": "+977 1 4000000",
        "totalAmount": total_amount,
    })
    if not print_result(booking_result, ["id", "referenceNumber", "totalAmount", "paymentStatus"]):
        sys.exit(1)

    booking_id = booking_result["data"]["id"]
    reference_number = booking_result["data"]["referenceNumber"]
    print(f"\nBooking created: {reference_number}")

    if args.skip_payment:
        print("\n" + "="*60)
        print("FLOW COMPLETE (skipped payment)")
        print("="*60)
        return

    # Step 4: Create payment intent
    print_step(4, "Create payment intent")
    intent_result = api_request("POST", "/api/create-payment-intent", {
        "amount": float(total_amount),
        "bookingId": booking_id,
    })
    if not print_result(intent_result):
        sys.exit(1)
    payment_intent_id = intent_result["data"]["paymentIntentId"]

    # Step 5: Confirm payment
    print_step(5, "Confirm payment")
    confirm_result = api_request("POST", "/api/confirm-payment", {
        "paymentIntentId": payment_intent_id,
        "bookingId": booking_id,
    })
    if not print_result(confirm_result, ["success", "paymentStatus"]):
        sys.exit(1)

    # Step 6: Look up booking
    print_step(6, "Look up booking by reference")
    lookup_result = api_request("GET", f"/api/bookings/{reference_number}")
    if not print_result(lookup_result, ["referenceNumber", "paymentStatus", "paymentIntentId"]):
        sys.exit(1)

    # Final summary
    print("\n" + "="*60)
    print("FULL FLOW COMPLETE")
    print("="*60)
    print(f"Booking:        {reference_number}")
    print(f"Total Paid:     {total_amount}")
    print(f"Payment Status: {lookup_result['data']['paymentStatus']}")


if __name__ == "__main__":
    main()
