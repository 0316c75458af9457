# tests/generated_datasets/dataset_generator_logical.py
import random

# Standard column names for generated datasets
TARGET_COLUMN = 'class_label'


def generate_xor_class_data(
    num_samples=200,
    feature_names=None, # Two feature names
    cut=0.5, # Each feature is "on" when above cut
    label_noise=0.0,
    seed=None
):
    """
    Generates data where the class is the XOR of two thresholded uniform features.
    No single split carries information, so greedy entropy trees need depth > 1.
    """
    if feature_names is None:
        feature_names = ['x_a', 'x_b']
    if len(feature_names) != 2:
        raise ValueError("feature_names must hold exactly two names.")

    rng = random.Random(seed)
    data = []
    for i in range(num_samples):
        a = rng.random()
        b = rng.random()
        class_label = int((a > cut) != (b > cut))

        if label_noise > 0 and rng.random() < label_noise:
            class_label = 1 - class_label

        data.append({
            feature_names[0]: a,
            feature_names[1]: b,
            TARGET_COLUMN: class_label,
            'id': f'xor_{i}'
        })
    return data


def generate_checkerboard_class_data(
    num_samples=400,
    feature_names=None,
    grid_size=3, # Cells per axis
    num_classes=2,
    seed=None
):
    """
    Generates a grid_size x grid_size checkerboard on [0, 1)^2; the class of a
    cell is (row + col) % num_classes.
    """
    if feature_names is None:
        feature_names = ['x_row', 'x_col']
    if grid_size < 1 or num_classes < 2:
        raise ValueError("grid_size must be >= 1 and num_classes >= 2.")

    rng = random.Random(seed)
    data = []
    for i in range(num_samples):
        u = rng.random()
        v = rng.random()
        cell_row = min(int(u * grid_size), grid_size - 1)
        cell_col = min(int(v * grid_size), grid_size - 1)

        data.append({
            feature_names[0]: u,
            feature_names[1]: v,
            TARGET_COLUMN: (cell_row + cell_col) % num_classes,
            'id': f'checker_{i}'
        })
    return data


def get_dataset(config=None):
    """
    Generates a train and test dataset based on the config.
    Config example:
    {
        "type": "xor" or "checkerboard",
        "num_samples_train": 200,
        "num_samples_test": 100,
        "feature_names": ["a", "b"],
        "xor_params": {"cut": 0.5, "label_noise": 0.0},
        "checkerboard_params": {"grid_size": 3, "num_classes": 2},
        "seed": 11
    }
    """
    if config is None:
        config = { # Default config
            "type": "xor",
            "num_samples_train": 400,
            "num_samples_test": 200,
            "feature_names": ["x_a", "x_b"],
            "xor_params": {"cut": 0.5, "label_noise": 0.0},
            "seed": None
        }

    seed = config.get("seed")
    test_seed = None if seed is None else seed + 1

    if config["type"] == "xor":
        xor_p = config.get("xor_params", {})
        common_params = {"feature_names": config["feature_names"], **xor_p}
        data_train = generate_xor_class_data(num_samples=config["num_samples_train"], seed=seed, **common_params)
        data_test = generate_xor_class_data(num_samples=config["num_samples_test"], seed=test_seed, **common_params)
    elif config["type"] == "checkerboard":
        cb_p = config.get("checkerboard_params", {})
        common_params = {"feature_names": config["feature_names"], **cb_p}
        data_train = generate_checkerboard_class_data(num_samples=config["num_samples_train"], seed=seed, **common_params)
        data_test = generate_checkerboard_class_data(num_samples=config["num_samples_test"], seed=test_seed, **common_params)
    else:
        raise ValueError(f"Unknown dataset type in config: {config['type']}")

    return data_train, data_test, list(config["feature_names"])


if __name__ == '__main__':
    train_data, test_data, feat_cols = get_dataset({
        "type": "checkerboard", "num_samples_train": 20, "num_samples_test": 10,
        "feature_names": ["u", "v"], "checkerboard_params": {"grid_size": 2, "num_classes": 2}, "seed": 5
    })
    print(f"Generated {len(train_data)} training samples and {len(test_data)} test samples.")
    print(f"Feature columns: {feat_cols}")
    print("Sample training row:", random.choice(train_data))
