"""Database configuration and connection."""
from pymongo import MongoClient
import streamlit as st
from config.settings import MONGO_URI, DB_NAME, MONGO_TIMEOUT_MS

@st.cache_resource
def get_database():
    """Get MongoDB database connection."""
    client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
    return client[DB_NAME]

def get_collection(collection_name):
    """Get specific collection."""
    db = get_database()
    return db[collection_name]
