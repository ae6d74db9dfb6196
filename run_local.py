import uvicorn

if __name__ == "__main__":
    # Set PROFILE / ACTIVATE_GRAPHIQL in the environment or .env as needed
    uvicorn.run("gql_fastapi.main:create_app", factory=True, host="127.0.0.1", port=8000, reload=True, lifespan="on")
