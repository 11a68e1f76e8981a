## matrix transformation operations for 2D homogeneous coordinates
## in vecpath

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from math import *
import vecpath.geom as geom

## a matrix is represented as a list of three three-vectors, one per
## row.  Points are (x, y) tuples and are lifted to the column vector
## [x, y, 1] for multiplication, then projected back by dividing
## through by the homogeneous coordinate.

## Rotation() and Translation() build the elementary matrices.
## Compose them with mul(), remembering that for column vectors the
## rightmost matrix is applied first.


class Matrix:
    """3x3 transformation matrix for homogeneous 2D coordinates"""

    def __init__(self,a=None):
        self.m = [[1,0,0],
                  [0,1,0],
                  [0,0,1]]

        if isinstance(a,(tuple,list)):
            if len(a) == 3 and all(isinstance(r,(tuple,list)) and len(r) == 3 for r in a):
                for i in range(3):
                    for j in range(3):
                        self.set(i,j,a[i][j])
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{})".format(self.m[0],self.m[1],self.m[2])

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self.m[i][j]

    #set value indexed by i,j
    def set(self,i,j,x):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to set: {},{}'.format(i,j))
        if not geom.isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        self.m[i][j]=x

    def getrow(self,i):
        if i < 0 or i > 2:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self,j):
        if j < 0 or j > 2:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j],
                self.m[1][j],
                self.m[2][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # point, compute Mx and return the transformed point.

    def mul(self,x):
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(3):
                row = self.getrow(i)
                for j in range(3):
                    col = x.getcol(j)
                    result.set(i,j,row[0]*col[0]+row[1]*col[1]+row[2]*col[2])
            return result
        elif geom.ispoint(x):
            v = [x[0],x[1],1.0]
            r = [ self.m[i][0]*v[0]+self.m[i][1]*v[1]+self.m[i][2]*v[2]
                  for i in range(3) ]
            if abs(r[2]) < geom.epsilon:
                raise ValueError('transformed point has no finite projection')
            return geom.point(r[0]/r[2],r[1]/r[2])

        raise ValueError('bad thing passed to mul(): {}'.format(x))


# return the rotation matrix for a counter-clockwise rotation of
# angle degrees about the origin
def Rotation(angle):
    if not geom.isgoodnum(angle):
        raise ValueError('bad rotation angle: {}'.format(angle))
    rad = (angle%360.0)*geom.pi2/360.0

    cang = cos(rad)
    sang = sin(rad)

    R = [[cang, -sang, 0],
         [sang,  cang, 0],
         [0,     0,    1]]

    return Matrix(R)

def Translation(delta,inverse=False):
    if not geom.ispoint(delta):
        raise ValueError('bad translation vector: {}'.format(delta))
    dx = delta[0]
    dy = delta[1]
    if inverse:
        dx = -dx
        dy = -dy
    T = [[1,0,dx],
         [0,1,dy],
         [0,0,1]]
    return Matrix(T)

# rotation of angle degrees about the point cent
def RotationAbout(angle,cent):
    if cent[0] == 0 and cent[1] == 0:
        return Rotation(angle)
    mat = Translation(cent)
    mat = mat.mul(Rotation(angle))
    return mat.mul(Translation(cent,inverse=True))
