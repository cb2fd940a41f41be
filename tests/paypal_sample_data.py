auth_sample_response = {
    "scope": "https://uri.paypal.com/services/invoicing https://uri.paypal.com/services/payments/payment",
    "access_token": "A21AAFEpH4PsADK7qSS7pSRsgzfENtu-Q1ysgEDVDESseMHBYXVJYE8ovjj68elIDy8nF26AwPhfXTIeWAZHSLIsQkSYz9ifg",
    "token_type": "Bearer",
    "app_id": "APP-80W284485P519543T",
    "expires_in": 31668,
    "nonce": "2020-04-03T15:35:36ZaYZlGvEkV4yVSz8g6bAKFoGSEzuy3CQcz3ljhibkOHg",
}

create_order_sample_response = {
    "id": "1AB23456CD789012E",
    "status": "CREATED",
    "links": [
        {
            "href": "https://api.sandbox.paypal.com/v2/checkout/orders/1AB23456CD789012E",
            "rel": "self",
            "method": "GET",
        },
        {
            "href": "https://www.sandbox.paypal.com/checkoutnow?token=1AB23456CD789012E",
            "rel": "approve",
            "method": "GET",
        },
        {
            "href": "https://api.sandbox.paypal.com/v2/checkout/orders/1AB23456CD789012E",
            "rel": "update",
            "method": "PATCH",
        },
        {
            "href": "https://api.sandbox.paypal.com/v2/checkout/orders/1AB23456CD789012E/capture",
            "rel": "capture",
            "method": "POST",
        },
    ],
}

capture_order_sample_response = {
    "id": "1AB23456CD789012E",
    "status": "COMPLETED",
    "payment_source": {
        "paypal": {
            "email_address": "buyer@example.com",
            "account_id": "QYR5Z8XDVJNXQ",
        }
    },
    "purchase_units": [
        {
            "reference_id": "default",
            "shipping": {
                "name": {"full_name": "John Doe"},
                "address": {
                    "address_line_1": "Hauptstrasse 1",
                    "admin_area_2": "Berlin",
                    "admin_area_1": "BE",
                    "postal_code": "10115",
                    "country_code": "DE",
                },
            },
            "payments": {
                "captures": [
                    {
                        "id": "3C679366HH908993F",
                        "status": "COMPLETED",
                        "amount": {"currency_code": "EUR", "value": "10.50"},
                        "final_capture": True,
                        "seller_protection": {
                            "status": "ELIGIBLE",
                            "dispute_categories": [
                                "ITEM_NOT_RECEIVED",
                                "UNAUTHORIZED_TRANSACTION",
                            ],
                        },
                        "seller_receivable_breakdown": {
                            "gross_amount": {"currency_code": "EUR", "value": "10.50"},
                            "paypal_fee": {"currency_code": "EUR", "value": "0.57"},
                            "net_amount": {"currency_code": "EUR", "value": "9.93"},
                        },
                        "custom_id": "user-42",
                        "links": [
                            {
                                "href": "https://api.sandbox.paypal.com/v2/payments/captures/3C679366HH908993F",
                                "rel": "self",
                                "method": "GET",
                            },
                            {
                                "href": "https://api.sandbox.paypal.com/v2/payments/captures/3C679366HH908993F/refund",
                                "rel": "refund",
                                "method": "POST",
                            },
                        ],
                        "create_time": "2023-02-02T14:19:32Z",
                        "update_time": "2023-02-02T14:19:33Z",
                    }
                ]
            },
        }
    ],
    "payer": {
        "name": {"given_name": "John", "surname": "Doe"},
        "email_address": "buyer@example.com",
        "payer_id": "QYR5Z8XDVJNXQ",
        "address": {"country_code": "DE"},
    },
    "links": [
        {
            "href": "https://api.sandbox.paypal.com/v2/checkout/orders/1AB23456CD789012E",
            "rel": "self",
            "method": "GET",
        }
    ],
}

capture_order_error = {
    "name": "UNPROCESSABLE_ENTITY",
    "details": [
        {
            "issue": "ORDER_NOT_APPROVED",
            "description": "Payer has not yet approved the Order for payment.",
        }
    ],
    "message": "The requested action could not be performed, semantically incorrect, or failed business validation.",
    "debug_id": "f8b3ce1b9c0f4",
}
