"""
API v1 Main Router
Aggregates all v1 API endpoints into a single router.

This router is included in main.py with prefix /api/{API_VERSION}.
Every router defines its own prefix.
"""

from fastapi import APIRouter

from emur.api.v1 import (
    answers,
    articles,
    categories,
    error_logs,
    forecasts,
    health_services,
    maps,
    medical,
    medical_records,
    monitorings,
    questions,
    recipes,
    reminders,
    symptoms,
    treatments,
    users,
)


api_router = APIRouter()


# Include user endpoints
# Endpoints: POST /users/login, POST /users/signup, GET/PUT /users,
# PUT /users/active/{uuid}, PUT /users/banned/{uuid}
# Login and signup are public; status toggles require admin
api_router.include_router(users.router, tags=["Users"])


# Include article endpoints
# Endpoints: GET/POST /articles, PUT/DELETE /articles/{uuid}, POST /articles/{uuid}/categories
# Writes require admin, multipart upload on create
api_router.include_router(articles.router, tags=["Articles"])


# Include category endpoints
# Endpoints: GET/POST /categories, PUT/DELETE /categories/{uuid}
api_router.include_router(categories.router, tags=["Categories"])


# Include question and answer endpoints
# Endpoints: GET/POST /questions, GET /questions/{uuid}, POST /answers
api_router.include_router(questions.router, tags=["Questions"])
api_router.include_router(answers.router, tags=["Questions"])


# Include recipe endpoints
# Endpoints: GET/POST /recipes, PUT/DELETE /recipes/{uuid}, POST /recipes/{uuid}/vote
# Images get a 200x200 thumbnail
api_router.include_router(recipes.router, tags=["Recipes"])


# Include reminder endpoints
# Endpoints: GET/POST/PUT/DELETE /reminders (PUT/DELETE take ?uuid=)
# Owner only, multipart with repeated "file"
api_router.include_router(reminders.router, tags=["Reminders"])


# Include medical registry endpoints
# Endpoints: GET/POST /medical, POST /medical/rating
# POST /medical imports a CSV file in one transaction
api_router.include_router(medical.router, tags=["Medical"])


# Include health service endpoints
# Endpoints: GET/POST /healthservices, POST /healthservices/rating
api_router.include_router(health_services.router, tags=["Health Services"])


# Include treatment endpoints
# Endpoints: GET/POST /treatments, PUT/DELETE /treatments/{uuid}
api_router.include_router(treatments.router, tags=["Treatments"])


# Include symptom and monitoring endpoints
# Endpoints: GET/POST /symptoms, POST /symptoms/add-user, POST /symptoms/remove-user,
# GET /symptoms/user, GET/POST /monitorings
api_router.include_router(symptoms.router, tags=["Symptoms"])
api_router.include_router(monitorings.router, tags=["Monitorings"])


# Include medical record endpoints
# Endpoints: GET/POST /medicalrecords, PUT /medicalrecords/{uuid}
api_router.include_router(medical_records.router, tags=["Medical Records"])


# Include map endpoints
# Endpoints: GET/POST /maps, PUT/DELETE /maps/{uuid}
api_router.include_router(maps.router, tags=["Maps"])


# Include forecast endpoints
# Endpoints: GET /forecasts
# Rows are written by the forecast worker (emur-worker)
api_router.include_router(forecasts.router, tags=["Forecasts"])


# Include error logs endpoints
# Endpoints: GET /error-logs, GET /error-logs/{id}, PUT /error-logs/{id}/resolve
# Admin only
api_router.include_router(error_logs.router, tags=["Error Logs"])
