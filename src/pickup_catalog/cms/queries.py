"""GROQ queries used by the catalog."""

MANUFACTURERS_QUERY = """*[_type == "manufacturer"] | order(name asc) {
  _id,
  name,
  slug,
  logo
}"""

MANUFACTURER_BY_SLUG_QUERY = """*[_type == "manufacturer" && slug.current == $slug][0] {
  _id,
  name,
  slug,
  logo
}"""

TRUCK_MODELS_BY_MANUFACTURER_QUERY = """*[_type == "truckModel" && manufacturer._ref == $manufacturerId] | order(yearRange asc) {
  _id,
  title,
  slug,
  yearRange,
  manufacturer->{name, slug}
}"""

TRUCK_MODEL_BY_SLUG_QUERY = """*[_type == "truckModel" && slug.current == $slug][0] {
  _id,
  title,
  slug,
  yearRange,
  content,
  model3d,
  model3dAttribution,
  manufacturer->{name, slug}
}"""

# Every inline image of every truck model, tagged with its model's metadata
ALL_TRUCK_IMAGES_QUERY = """*[_type == "truckModel" && defined(content)] {
  _id,
  title,
  yearRange,
  manufacturer->{name, slug},
  "images": content[_type == "image"] {
    alt,
    caption,
    asset,
    "truckTitle": ^.title,
    "yearRange": ^.yearRange,
    "manufacturerName": ^.manufacturer->name,
    "truckSlug": ^.slug.current,
    "manufacturerSlug": ^.manufacturer->slug.current
  }
}[count(images) > 0]"""
