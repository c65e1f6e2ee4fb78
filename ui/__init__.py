# Streamlit presentation layer. Calls core only; no domain logic here.
