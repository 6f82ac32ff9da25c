import pandas as pd
import numpy as np
from datetime import datetime, timedelta

# Set random seed for reproducibility
np.random.seed(42)

# Parameters
n_users = 100
n_items = 500
n_events = 10000
n_segments = 5

# Create user IDs
user_ids = [f"U_{str(i).zfill(2)}" for i in range(n_users)]

# Create item IDs
item_ids = [f"I_{str(i).zfill(4)}" for i in range(n_items)]

# Users of a segment favour a slice of the catalogue so neighborhoods exist
user_segments = np.random.randint(0, n_segments, size=n_users)
segment_size = n_items // n_segments

event_users = np.random.randint(0, n_users, size=n_events)
in_segment = np.random.random_sample(n_events) < 0.7
segment_items = user_segments[event_users] * segment_size + np.random.randint(0, segment_size, size=n_events)
random_items = np.random.randint(0, n_items, size=n_events)
event_items = np.where(in_segment, segment_items, random_items)

# Millisecond timestamps over the last 30 days
end_date = datetime.now()
start_date = end_date - timedelta(days=30)
timestamps = np.random.randint(
    int(start_date.timestamp() * 1000),
    int(end_date.timestamp() * 1000),
    size=n_events,
    dtype=np.int64,
)

# Scores in [0, 1], higher inside the user's segment
scores = np.where(
    in_segment,
    np.random.uniform(0.5, 1.0, size=n_events),
    np.random.uniform(0.0, 0.6, size=n_events),
).round(3)

events_df = pd.DataFrame({
    'user_id': [user_ids[u] for u in event_users],
    'item_id': [item_ids[i] for i in event_items],
    'score': scores,
    'timestamp': timestamps,
})

# Save data
events_df.to_parquet('events.parquet', index=False)
events_df.to_csv('events.csv', index=False)

print(f"Created {n_events} events for {n_users} users and {n_items} items")
print("Events saved to events.parquet and events.csv")
