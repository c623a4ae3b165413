contact_responses = {
    201: {
        "description": "Contact Form Submitted Successfully",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Message Stored",
                        "value": {
                            "success": True,
                            "message": "Thank you for your message! I will get back to you soon.",
                            "data": {
                                "name": "Ada Lovelace",
                                "email": "ada@example.com",
                                "subject": "Collaboration",
                                "message": "I enjoyed your portfolio and would like to talk.",
                            },
                        },
                    }
                }
            }
        },
    },
    400: {
        "description": "Bad Request - Validation Failed",
        "content": {
            "application/json": {
                "examples": {
                    "missing_fields": {
                        "summary": "Empty Fields",
                        "value": {
                            "success": False,
                            "message": "Validation failed",
                            "errors": [
                                {
                                    "field": "name",
                                    "message": "Name is required",
                                    "value": "   ",
                                    "location": "body",
                                },
                                {
                                    "field": "subject",
                                    "message": "Subject is required",
                                    "value": None,
                                    "location": "body",
                                },
                            ],
                        },
                    },
                    "invalid_email": {
                        "summary": "Invalid Email",
                        "value": {
                            "success": False,
                            "message": "Validation failed",
                            "errors": [
                                {
                                    "field": "email",
                                    "message": "Please provide a valid email",
                                    "value": "not-an-email",
                                    "location": "body",
                                }
                            ],
                        },
                    },
                }
            }
        },
    },
    500: {
        "description": "Internal Server Error",
        "content": {
            "application/json": {
                "examples": {
                    "server_error": {
                        "summary": "Message Could Not Be Stored",
                        "value": {
                            "success": False,
                            "message": "Something went wrong. Please try again later.",
                        },
                    },
                }
            }
        },
    },
}


list_contacts_responses = {
    200: {
        "description": "Contact Messages Retrieved Successfully",
        "content": {
            "application/json": {
                "examples": {
                    "success": {
                        "summary": "Newest First",
                        "value": {
                            "success": True,
                            "data": [
                                {
                                    "id": "223e4567-e89b-12d3-a456-426614174001",
                                    "name": "Grace Hopper",
                                    "email": "grace@example.com",
                                    "subject": "Speaking invitation",
                                    "message": "Would you present at our meetup?",
                                    "status": "unread",
                                    "createdAt": "2024-01-15T10:30:00Z",
                                },
                                {
                                    "id": "123e4567-e89b-12d3-a456-426614174000",
                                    "name": "Ada Lovelace",
                                    "email": "ada@example.com",
                                    "subject": "Collaboration",
                                    "message": "I enjoyed your portfolio and would like to talk.",
                                    "status": "read",
                                    "createdAt": "2024-01-14T15:45:00Z",
                                },
                            ],
                        },
                    },
                    "success_empty": {
                        "summary": "No Messages",
                        "value": {"success": True, "data": []},
                    },
                }
            }
        },
    },
    500: {
        "description": "Internal Server Error",
        "content": {
            "application/json": {
                "examples": {
                    "server_error": {
                        "summary": "Store Unavailable",
                        "value": {
                            "success": False,
                            "message": "Failed to retrieve contact messages",
                        },
                    },
                }
            }
        },
    },
}
