'''
Output of a triangulation as WKT in text files (e.g. to inspect in QGIS)
'''


def output_vertices(points, fh):
    """Output list of vertices as WKT to text file"""
    fh.write("id;wkt\n")
    for i, pt in enumerate(points):
        fh.write("{0};POINT({1[0]} {1[1]})\n".format(i, pt))


def output_edges(dt, fh):
    """Output edges of triangulation dt as WKT to text file"""
    pts = dt.points
    fh.write("id;start;end;wkt\n")
    for i, (a, b) in enumerate(dt.edges()):
        fh.write("{0};{1};{2};"
                 "LINESTRING({3[0]} {3[1]}, {4[0]} {4[1]})\n".format(
                    i, a, b, pts[a], pts[b]))


def output_triangles(dt, fh):
    """Output triangles of triangulation dt as WKT to text file"""
    pts = dt.points
    fh.write("id;v0;v1;v2;wkt\n")
    for i, (a, b, c) in enumerate(dt.triangles()):
        ring = ", ".join("{0[0]} {0[1]}".format(pts[v]) for v in (a, b, c, a))
        fh.write("{0};{1};{2};{3};POLYGON(({4}))\n".format(i, a, b, c, ring))
