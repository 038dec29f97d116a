from formengine.schemas.form import FormConfig


SAMPLE_FORM = {
    "id": "sample-form",
    "title": "Sample Medical Form",
    "description": "A sample form showcasing conditional logic and multi-step functionality",
    "isMultiStep": True,
    "steps": [
        {
            "id": "step-1",
            "title": "Basic Information",
            "description": "Please provide your basic information",
            "questions": [
                {
                    "id": "question-1",
                    "type": "short-text",
                    "title": "What is your full name?",
                    "description": "Please enter your first and last name",
                    "required": True,
                    "placeholder": "John Doe"
                },
                {
                    "id": "question-2",
                    "type": "single-choice",
                    "title": "Are you an amputee?",
                    "description": "This will determine additional questions to show",
                    "required": True,
                    "options": [
                        {"id": "yes-option", "label": "Yes", "value": "yes"},
                        {"id": "no-option", "label": "No", "value": "no"}
                    ]
                },
                {
                    "id": "question-3",
                    "type": "multiple-choice",
                    "title": "Select amputee area(s)?",
                    "description": "Choose all areas that apply",
                    "required": True,
                    "options": [
                        {"id": "right-arm", "label": "Right arm", "value": "right-arm"},
                        {"id": "left-arm", "label": "Left arm", "value": "left-arm"},
                        {"id": "right-leg", "label": "Right leg", "value": "right-leg"},
                        {"id": "left-leg", "label": "Left leg", "value": "left-leg"}
                    ],
                    "conditionalLogic": [
                        {"questionId": "question-2", "condition": "equals", "value": "yes"}
                    ]
                }
            ]
        },
        {
            "id": "step-2",
            "title": "Additional Information",
            "description": "Please provide additional details",
            "questions": [
                {
                    "id": "question-4",
                    "type": "date",
                    "title": "Date of birth",
                    "required": True
                },
                {
                    "id": "question-5",
                    "type": "email",
                    "title": "Email address",
                    "required": True,
                    "placeholder": "john.doe@example.com"
                },
                {
                    "id": "question-6",
                    "type": "single-choice",
                    "title": "Do you wear vision correction?",
                    "required": True,
                    "options": [
                        {"id": "glasses-option", "label": "Glasses", "value": "glasses"},
                        {"id": "contacts-option", "label": "Contact lenses", "value": "contact-lense"},
                        {"id": "none-option", "label": "None", "value": "none"}
                    ]
                },
                {
                    "id": "question-7",
                    "type": "short-text",
                    "title": "When did you last have an eye test?",
                    "required": False,
                    "conditionalLogic": [
                        {"questionId": "question-6", "condition": "equals", "value": ["glasses", "contact-lense"]}
                    ]
                },
                {
                    "id": "question-8",
                    "type": "long-text",
                    "title": "Additional comments",
                    "description": "Any additional information you would like to share",
                    "required": False,
                    "placeholder": "Enter your comments here..."
                }
            ]
        }
    ],
    "settings": {
        "allowBack": True,
        "showProgress": True,
        "submitButtonText": "Submit Form",
        "successMessage": "Thank you! Your form has been submitted successfully."
    }
}


def build_sample_form() -> FormConfig:
    """Sample multi-step form used for demos and previews"""
    return FormConfig.model_validate(SAMPLE_FORM)
